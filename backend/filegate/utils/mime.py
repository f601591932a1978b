"""Extension based MIME classification."""

DIRECTORY_MIME = "directory"

# Keys are lowercase extensions including the leading dot.
MIME_TYPES: dict[str, str] = {
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".png": "image/png",
    ".gif": "image/gif",
    ".mp4": "video/mp4",
    ".mp3": "audio/mpeg",
    ".txt": "text/plain",
    ".pdf": "application/pdf",
    ".zip": "application/zip",
    ".tar": "application/x-tar",
    ".html": "text/html",
    ".htm": "text/html",
    ".css": "text/css",
    ".js": "application/javascript",
    ".json": "application/json",
    ".xml": "application/xml",
    ".csv": "text/csv",
    ".doc": "application/msword",
    ".docx": "application/msword",
    ".xls": "application/vnd.ms-excel",
    ".xlsx": "application/vnd.ms-excel",
    ".ppt": "application/vnd.ms-powerpoint",
    ".pptx": "application/vnd.ms-powerpoint",
    ".avi": "video/x-msvideo",
    ".mov": "video/quicktime",
    ".mkv": "video/x-matroska",
    ".flv": "video/x-flv",
    ".webm": "video/webm",
    ".wav": "audio/wav",
    ".ogg": "audio/ogg",
    ".bmp": "image/bmp",
    ".svg": "image/svg+xml",
    ".ico": "image/x-icon",
    ".exe": "application/x-msdownload",
    ".dll": "application/x-msdownload",
    ".sh": "application/x-sh",
}


def file_extension(name: str) -> str:
    """Suffix from the last dot of a base name, or "" if there is no dot.

    Dotfiles count as all extension: ``.bashrc`` -> ``.bashrc``.
    """
    dot = name.rfind(".")
    return name[dot:] if dot >= 0 else ""


def classify(name: str) -> str:
    """Map a file name to a MIME type.

    Unknown extensions fall back to the uppercased extension (``.foo`` ->
    ``.FOO``); names without an extension give ``""``.
    """
    ext = file_extension(name).lower()
    return MIME_TYPES.get(ext, ext.upper())
