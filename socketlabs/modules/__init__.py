from .injection import Message, Request, Response

__all__ = ["Message", "Request", "Response"]
