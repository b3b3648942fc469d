"""
Post Renderer
=============

Fill a show's promotional template with episode data.
"""

from .shows import Show, get_profile


def render_post(
    show: Show,
    video_id: str,
    episode_number: str,
    clean_title: str,
    description: str,
) -> str:
    """
    Render the promotional post text for one episode.

    Values are inserted verbatim; empty title or description render as
    empty text in place.
    """
    return get_profile(show).template.format(
        episode_number=episode_number,
        video_id=video_id,
        title=clean_title,
        description=description,
    )
