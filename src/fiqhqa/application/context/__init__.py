from fiqhqa.application.context.request_info import RequestInfo

__all__ = ["RequestInfo"]
