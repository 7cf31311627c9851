from headshot_gateway.models.portrait_prompt import OUTPUT_MEDIA_TYPE, PORTRAIT_INSTRUCTION

__all__ = ["OUTPUT_MEDIA_TYPE", "PORTRAIT_INSTRUCTION"]
