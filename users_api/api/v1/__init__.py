from .user_controller import router as user_router, user_body_validation_handler


__all__ = ["user_router", "user_body_validation_handler"]
