"""Text formatting for durations, playback clocks and file sizes."""

KB = 1024
MB = KB * 1024
GB = MB * 1024


def format_duration(milliseconds: int) -> str:
    """Format a duration in milliseconds as ``HH:MM:SS``."""
    seconds = int(milliseconds) // 1000
    minutes = seconds // 60
    hours = minutes // 60
    return f"{hours:02d}:{minutes % 60:02d}:{seconds % 60:02d}"


def format_file_size(size: int) -> str:
    """Format a size in bytes using the largest fitting binary unit."""
    if size >= GB:
        return f"{size / GB:.2f} GB"
    if size >= MB:
        return f"{size / MB:.2f} MB"
    if size >= KB:
        return f"{size / KB:.2f} KB"
    return f"{size} 字节"


def format_clock(milliseconds: int) -> str:
    """Format a playback position as ``MM:SS``; minutes are not wrapped."""
    minutes, seconds = divmod(int(milliseconds) // 1000, 60)
    return f"{minutes:02d}:{seconds:02d}"


def format_total(milliseconds: int) -> str:
    """Format a track length as shown next to the position clock."""
    return "/" + format_clock(milliseconds)