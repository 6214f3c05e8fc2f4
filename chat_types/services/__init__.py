from chat_types.services.codec import decode_messages, dumps_message, loads_message

__all__ = ["decode_messages", "loads_message", "dumps_message"]
