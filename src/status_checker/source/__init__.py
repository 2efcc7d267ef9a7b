from status_checker.source.file_source import read_url_lines

__all__ = ["read_url_lines"]
