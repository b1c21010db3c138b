import logging
import re
from typing import List, Optional, TypedDict

import requests

from errors import NotFoundError, QuotaOrAuthError, UpstreamError

logger = logging.getLogger(__name__)

YOUTUBE_VIDEO_URL = 'https://www.googleapis.com/youtube/v3/videos'
VIDEO_PARTS = 'snippet,contentDetails,statistics'

URL_PATTERN = re.compile(
    r"(?:youtube\.com/watch\?v=|youtu\.be/|youtube\.com/embed/|youtube\.com/v/)([^&\n?#]+)"
)
VIDEO_ID_PATTERN = re.compile(r"[a-zA-Z0-9_-]{11}")


class VideoMetadata(TypedDict):
    title: str
    description: str
    channelTitle: str
    channelId: str
    publishedAt: str
    thumbnail: Optional[str]
    duration: str
    viewCount: int
    likeCount: int
    tags: List[str]


def extract_video_id(url: str) -> Optional[str]:
    """
    Parse a YouTube URL (watch, youtu.be, embed, v/) or a bare video ID
    and return the 11-character video ID, or None when nothing matches.
    """
    if not isinstance(url, str):
        return None
    m = URL_PATTERN.search(url)
    if m:
        candidate = m.group(1)
        return candidate if VIDEO_ID_PATTERN.fullmatch(candidate) else None
    if VIDEO_ID_PATTERN.fullmatch(url):
        return url
    return None


def parse_count(value) -> int:
    """Lenient int parse for statistics fields; anything unusable counts as 0."""
    try:
        count = int(value)
    except (TypeError, ValueError):
        return 0
    return max(count, 0)


def pick_thumbnail(thumbnails) -> Optional[str]:
    for size in ('high', 'medium'):
        url = (thumbnails.get(size) or {}).get('url')
        if url:
            return url
    return None


def _to_metadata(video) -> VideoMetadata:
    snippet = video.get('snippet') or {}
    statistics = video.get('statistics') or {}
    content_details = video.get('contentDetails') or {}
    return {
        'title': snippet.get('title') or '',
        'description': snippet.get('description') or '',
        'channelTitle': snippet.get('channelTitle') or '',
        'channelId': snippet.get('channelId') or '',
        'publishedAt': snippet.get('publishedAt') or '',
        'thumbnail': pick_thumbnail(snippet.get('thumbnails') or {}),
        'duration': content_details.get('duration') or '',
        'viewCount': parse_count(statistics.get('viewCount')),
        'likeCount': parse_count(statistics.get('likeCount')),
        'tags': list(snippet.get('tags') or []),
    }


def fetch_video_metadata(video_id: str, api_key: str, session: Optional[requests.Session] = None) -> VideoMetadata:
    """
    Fetch snippet, contentDetails and statistics for one video.

    The status code is checked before the body is read. Raises
    QuotaOrAuthError (403), NotFoundError (404 or no items) or
    UpstreamError (any other failure).
    """
    params = {
        'part': VIDEO_PARTS,
        'id': video_id,
        'key': api_key
    }
    try:
        if session is not None:
            resp = session.get(YOUTUBE_VIDEO_URL, params=params)
        else:
            with requests.Session() as http:
                resp = http.get(YOUTUBE_VIDEO_URL, params=params)
    except requests.RequestException as e:
        logger.error(f"YouTube API request failed for {video_id}: {e}")
        raise UpstreamError(f"YouTube API request failed: {e}") from e

    if resp.status_code == 403:
        logger.error(f"YouTube API returned 403 for {video_id}")
        raise QuotaOrAuthError('API quota exceeded or invalid API key')
    if resp.status_code == 404:
        logger.error(f"YouTube API returned 404 for {video_id}")
        raise NotFoundError('Video not found')
    if not 200 <= resp.status_code < 300:
        logger.error(f"YouTube API error for {video_id}: HTTP {resp.status_code} {resp.reason}")
        raise UpstreamError(f"HTTP {resp.status_code}: {resp.reason}",
                            upstream_status=resp.status_code, upstream_reason=resp.reason)

    try:
        data = resp.json()
    except ValueError as e:
        logger.error(f"YouTube API returned a non-JSON body for {video_id}: {e}")
        raise UpstreamError('Invalid response from YouTube API') from e

    items = data.get('items') if isinstance(data, dict) else None
    if not items:
        logger.warning(f"No items returned for {video_id}")
        raise NotFoundError('Video not found or is private')

    return _to_metadata(items[0])
