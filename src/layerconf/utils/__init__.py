from .dicts import MISSING_PATH, get_path, insert_path, split_key

__all__ = ["MISSING_PATH", "get_path", "insert_path", "split_key"]
