from .analysis import AnalysisRequest, EndpointIndex, ErrorResponse, ServiceInfo

__all__ = [
    "AnalysisRequest",
    "EndpointIndex",
    "ErrorResponse",
    "ServiceInfo",
]
