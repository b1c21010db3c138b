from config import Config
from errors import YouTubeAPIError
from youtube_client import extract_video_id, fetch_video_metadata


def main():
    config = Config.from_env()
    url = input('Enter YouTube URL or video ID: ').strip()
    video_id = extract_video_id(url)
    if not video_id:
        print('Invalid YouTube URL format.')
        return
    if not config.youtube_api_key:
        print('YOUTUBE_API_KEY is not configured.')
        return
    try:
        details = fetch_video_metadata(video_id, config.youtube_api_key)
    except YouTubeAPIError as e:
        print(f'Could not fetch video details: {e}')
        return
    print(f"Video ID: {video_id}")
    print(f"Title: {details['title']}")
    print(f"Channel: {details['channelTitle']} ({details['channelId']})")
    print(f"Published: {details['publishedAt']}")
    print(f"Duration: {details['duration']}")
    print(f"Views: {details['viewCount']:,}  Likes: {details['likeCount']:,}")
    print(f"Tags: {', '.join(details['tags']) if details['tags'] else '(none)'}")
    print(f"Description: {details['description'][:120]}{'...' if len(details['description']) > 120 else ''}")


if __name__ == '__main__':
    main()
