from enum import Enum


class FormatType(str, Enum):
    INT = "int"
    FLOAT = "float"


format_classes = {
    FormatType.INT: int,
    FormatType.FLOAT: float,
}

HUE_360 = 360
