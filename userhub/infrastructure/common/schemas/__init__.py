from .response_wrappers import DataResponse, ErrorBody, ErrorResponse, SuccessResponse

__all__ = ["DataResponse", "ErrorBody", "ErrorResponse", "SuccessResponse"]
