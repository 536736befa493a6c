"""Global constants for the chart API."""

# Chart API endpoints
GOOGLE_API = "http://chart.apis.google.com/chart?"  # Base for GET urls
GOOGLE_POST_API = "http://chart.apis.google.com/chart"  # Form action for POST requests

# Chart size limits enforced by the service
MAX_SIDE = 1000  # Maximum width or height in pixels
MAX_AREA = 300000  # Maximum width * height in pixels

# Separators
AMPERSAND_SEPARATOR = "&"  # Between url parameters
DEFAULT_SEPARATOR = "|"  # Between fragments of the same prefix
COMMA_SEPARATOR = ","

# Encoding alphabets
SIMPLE_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789"
EXTENDED_ALPHABET = SIMPLE_ALPHABET + "-."
SIMPLE_MAX = len(SIMPLE_ALPHABET) - 1  # 61
EXTENDED_MAX = len(EXTENDED_ALPHABET) ** 2 - 1  # 4095
PERCENTAGE_MAX = 100

# Parameter prefixes
CHART_TYPE_PREFIX = "cht"
CHART_SIZE_PREFIX = "chs"
CHART_DATA_PREFIX = "chd"
CHART_LABEL_PREFIX = "chl"
CHART_COLOR_PREFIX = "chco"
DATA_SCALING_PREFIX = "chds"
CHART_TITLE_PREFIX = "chtt"
CHART_TITLE_STYLE_PREFIX = "chts"
OUTPUT_FORMAT_PREFIX = "chof"

# Color of pie slices without their own color when other slices have one
DEFAULT_SLICE_COLOR = "ff9900"
