"""Numeric limits and colorimetric constants shared by the parser and the conversions."""

# Parser limits
MAX_STR_LEN = 128
NUMBER_MAX = 16777216  # 2**24, largest integer exactly representable in float32
NUMBER_DECIMAL_LIMIT = 9

# Named color keyword length bounds
MIN_COLOR_NAME_LEN = 3
MAX_COLOR_NAME_LEN = 20

# Channel ranges
HUE_360 = 360
PERCENT_MAX = 100
U8_MAX = 255

# sRGB D65 reference white
D65_WHITE = (0.95047, 1.0, 1.08883)

# CIE ε and κ
CIE_E = 216.0 / 24389.0
CIE_K = 24389.0 / 27.0

# sRGB transfer function
SRGB_LINEAR_THRESHOLD = 0.0031308
SRGB_GAMMA = 2.4

XYZ_TO_LINEAR_SRGB = (
    ( 3.2404542, -1.5371385, -0.4985314),
    (-0.9692660,  1.8760108,  0.0415560),
    ( 0.0556434, -0.2040259,  1.0572252),
)

# See https://bottosson.github.io/posts/oklab/
OKLAB_TO_LMS_ = (
    (1.0,  0.3963377774,  0.2158037573),
    (1.0, -0.1055613423, -0.0638541728),
    (1.0, -0.0894841775, -1.2914855480),
)

LMS_TO_LINEAR_SRGB = (
    ( 4.0767416621, -3.3077115913,  0.2309699292),
    (-1.2684380046,  2.6097574011, -0.3413193965),
    (-0.0041960863, -0.7034186147,  1.7076147009),
)

# Percent scale factors for CSS arguments
LAB_AB_PERCENT_SCALE = 1.25
LCH_CHROMA_PERCENT_SCALE = 1.5
OKLAB_AB_PERCENT_SCALE = 0.004
