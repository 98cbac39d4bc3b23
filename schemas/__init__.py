from .requests import ColorConvertRequest, FormatColorCodeRequest, ParseColorCodeRequest
from .responses import ConvertResponse, ErrorResponse, KeywordResponse, ParseResponse, SuccessResponse

__all__ = [
    "ColorConvertRequest",
    "FormatColorCodeRequest",
    "ParseColorCodeRequest",
    "ConvertResponse",
    "ErrorResponse",
    "KeywordResponse",
    "ParseResponse",
    "SuccessResponse",
]
