"""
Shows
=====

The two recurring shows and everything that differs between them.

Each show is described by a ``ShowProfile``:
- marker word that precedes the episode number in a YouTube title
- prefix of the generated post file (GCAST42.txt, TF42.txt)
- promotional post template with named placeholders

Adding a show means adding an enum member and a profile; no other code
branches on the show.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional

from .errors import UsageError


class Show(str, Enum):
    """Supported promotional series."""
    GCAST = "GCAST"
    TECHNOLOGY_AND_FRIENDS = "TECHNOLOGY_AND_FRIENDS"

    @classmethod
    def from_selector(cls, selector: Optional[str]) -> "Show":
        """
        Resolve a command-line show selector.

        Only the first character counts, case-insensitively:
        "G", "gcast", "Gizmo" -> GCAST; "T", "tf", "tech" -> TECHNOLOGY_AND_FRIENDS.

        Raises:
            UsageError if the selector is missing or starts with anything else
        """
        if not selector:
            raise UsageError("Missing show argument")
        first = selector[0].upper()
        for show, profile in SHOW_PROFILES.items():
            if profile.selector == first:
                return show
        raise UsageError(f"Unknown show '{selector}'")


@dataclass(frozen=True)
class ShowProfile:
    """Per-show constants."""
    display_name: str
    selector: str
    marker_word: str
    file_prefix: str
    template: str


TECHNOLOGY_AND_FRIENDS_TEMPLATE = """\
Technology and Friends Episode {episode_number}: {title}

{description}

Watch the full interview on YouTube:
https://www.youtube.com/watch?v={video_id}

<iframe width="560" height="315" src="https://www.youtube.com/embed/{video_id}" frameborder="0" allowfullscreen></iframe>

#TechnologyAndFriends #Interview #Podcast #SoftwareDevelopment"""


GCAST_TEMPLATE = """\
GCast {episode_number}:

{title}

{description}

Watch the screencast: https://youtu.be/{video_id}

<iframe width="560" height="315" src="https://www.youtube.com/embed/{video_id}" frameborder="0" allowfullscreen></iframe>

#GCast #Screencast #Azure #Cloud"""


SHOW_PROFILES: Dict[Show, ShowProfile] = {
    Show.GCAST: ShowProfile(
        display_name="GCAST",
        selector="G",
        marker_word="GCast",
        file_prefix="GCAST",
        template=GCAST_TEMPLATE,
    ),
    Show.TECHNOLOGY_AND_FRIENDS: ShowProfile(
        display_name="Technology and Friends",
        selector="T",
        marker_word="Episode",
        file_prefix="TF",
        template=TECHNOLOGY_AND_FRIENDS_TEMPLATE,
    ),
}


def get_profile(show: Show) -> ShowProfile:
    """Return the profile for a show."""
    return SHOW_PROFILES[show]
