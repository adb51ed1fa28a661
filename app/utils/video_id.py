import re
from typing import Optional

# watch?v= and youtu.be short links, then shorts; first match wins
VIDEO_ID_PATTERNS = [
    re.compile(r"(?:youtube\.com/watch\?v=|youtu\.be/)([^&\n?#]+)"),
    re.compile(r"youtube\.com/shorts/([^?&\n]+)"),
]


def extract_video_id(url: str) -> Optional[str]:
    if not url or not isinstance(url, str):
        return None

    for pattern in VIDEO_ID_PATTERNS:
        match = pattern.search(url)
        if match:
            return match.group(1)
    return None
