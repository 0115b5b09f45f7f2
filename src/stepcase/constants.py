from typing import FrozenSet


STEP_KEYWORDS: FrozenSet[str] = frozenset(['given', 'when', 'then', 'and'])

KEYWORD_SCENARIO = 'Scenario:'
KEYWORD_OUTLINE_PREFIX = 'Scenario'
KEYWORD_OUTLINE = 'Outline:'
KEYWORD_BACKGROUND = 'Background:'

TABLE_DELIMITER = '|'
PLACEHOLDER_BEGIN = '<'
PLACEHOLDER_END = '>'

FEATURE_FILE_PATTERN = '*.feature'

LOG_FILE = 'stepcase.log'
ENV_LOG_FILE = 'STEPCASE_LOG_FILE'

# replaced values are scanned again, a value that contains its own placeholder would never resolve.
# counts replacements with values containing '<', plain values are not limited
MAX_PLACEHOLDER_REPLACEMENTS = 1000
