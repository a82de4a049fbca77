from .record_parser import ParsedLine, decode_line, iter_lines

__all__ = ["ParsedLine", "decode_line", "iter_lines"]
