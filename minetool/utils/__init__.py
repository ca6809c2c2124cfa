from .serialization import to_serializable, to_json_str, to_json_file

__all__ = ["to_serializable", "to_json_str", "to_json_file"]
