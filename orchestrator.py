"""
TV Promo - Main CLI
===================

Generate the promotional post for a GCast or Technology and Friends episode.

Usage:
    python orchestrator.py G ZobLLRBbN04
    python orchestrator.py T Xw80hwp4TdI

Flow:
    1. Validate show selector and video id
    2. Load settings (YT_API_KEY, TVPROMO_OUTPUT_DIR) from environment / .env
    3. Fetch video title + description from YouTube
    4. Parse episode number and clean title
    5. Render the show template
    6. Write <GCAST|TF><episode>.txt to the output folder

Exit status is 0 whenever the pipeline ran (errors are reported, not
signalled) and 2 when the usage message was printed.
"""

import logging
import sys
from functools import partial

from dotenv import load_dotenv

from tvpromo import (
    Show,
    TVPromoError,
    UsageError,
    fetch_video_metadata,
    generate_post,
    load_settings,
    normalize_video_id,
    write_post,
)

USAGE = """
Syntax Error!
Missing argument(s)

Syntax:
 TVPromo <show> <videoId>
where:
-show='G' for GCAST or 'T' for Technology and Friends
-videoId=YouTube video Id

e.g.,
 TVPromo G ZobLLRBbN04
 TVPromo T Xw80hwp4TdI&t
"""

# Only "ran" vs "printed usage"; reported errors still count as a run
EXIT_OK = 0
EXIT_USAGE = 2


def _print_usage() -> None:
    print(USAGE)


def main(argv=None) -> int:
    import argparse

    parser = argparse.ArgumentParser(
        prog="tvpromo",
        description="YouTube video → promotional post for GCast / Technology and Friends",
        add_help=False,
    )
    parser.add_argument("show", nargs="?", help="'G' for GCAST or 'T' for Technology and Friends")
    parser.add_argument("video_id", nargs="?", help="YouTube video id (or watch URL)")

    if argv is None:
        argv = sys.argv[1:]
    # Video ids may start with "-"; treat everything as positional
    args, _ = parser.parse_known_args(["--", *argv])

    # 1) Arguments
    try:
        if not args.video_id or not args.video_id.strip():
            raise UsageError("Missing video id")
        show = Show.from_selector(args.show)
    except UsageError:
        _print_usage()
        return EXIT_USAGE

    video_id = normalize_video_id(args.video_id)

    # 2) Settings
    load_dotenv()
    try:
        settings = load_settings()
    except TVPromoError as e:
        print(f"❌ {e}")
        return EXIT_OK

    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # 3-5) Fetch, parse, render
    print(f"\n🔍 Fetching {show.name} video: {video_id}")
    fetch = partial(fetch_video_metadata, api_key=settings.youtube_api_key)
    try:
        post = generate_post(video_id, show, fetch)
        # 6) Write
        fpath = write_post(post, settings.output_dir)
    except (TVPromoError, OSError) as e:
        print("❌ Error")
        print(f"   {e}")
        return EXIT_OK

    print()
    print(post.text)
    print(f"\n✅ File created at {fpath}")
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
