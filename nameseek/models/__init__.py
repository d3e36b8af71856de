from nameseek.models.user import UserName

__all__ = ["UserName"]
