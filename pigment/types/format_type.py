# No dependencies
from enum import Enum


class FormatType(str, Enum):
    INT = "int"
    FLOAT = "float"
    PERCENTAGE = "percentage"


max_channel = {
    FormatType.INT: 255,
    FormatType.FLOAT: 1.0,
    FormatType.PERCENTAGE: 100.0
}

HUE_360 = 360.0
