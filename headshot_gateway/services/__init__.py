from headshot_gateway.services.transform_service import (
    TransformGateway,
    classify_upstream_error,
    get_transform_gateway,
)

__all__ = ["TransformGateway", "classify_upstream_error", "get_transform_gateway"]
