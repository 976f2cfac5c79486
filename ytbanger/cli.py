#!/usr/bin/env python3
"""
CLI for YouTube topic authority scoring

Usage:
    python -m ytbanger.cli score videos.json [--locale es] [--top-videos 20]
    python -m ytbanger.cli summary videos.csv
    python -m ytbanger.cli api-convert videos_list.json --channels channels_list.json --out videos.json
"""
import argparse
import json
import logging
import sys
from typing import Optional

from .authority import (
    compute_authority,
    DEFAULT_CHANNEL_LIMIT,
    DEFAULT_LOCALE,
    DEFAULT_VIDEO_LIMIT,
    SUPPORTED_LOCALES,
)
from .authority.models import parse_timestamp
from .ingest import items_from_payload, load_records, records_from_api, summarize_run
from .ingest.loader import read_json_file

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def parse_args():
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="YouTube topic authority scoring CLI"
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output results as JSON"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    # Score command
    score_parser = subparsers.add_parser(
        "score",
        help="Compute the authority report for a file of video rows"
    )
    score_parser.add_argument(
        "input",
        help="Video rows as .json, .jsonl or .csv"
    )
    score_parser.add_argument(
        "--locale",
        choices=SUPPORTED_LOCALES,
        default=DEFAULT_LOCALE,
        help=f"Keyword lexicon locale (default: {DEFAULT_LOCALE})"
    )
    score_parser.add_argument(
        "--top-videos",
        type=int,
        default=DEFAULT_VIDEO_LIMIT,
        help=f"Number of top videos to report (default: {DEFAULT_VIDEO_LIMIT})"
    )
    score_parser.add_argument(
        "--top-channels",
        type=int,
        default=DEFAULT_CHANNEL_LIMIT,
        help=f"Number of top channels to report (default: {DEFAULT_CHANNEL_LIMIT})"
    )
    score_parser.add_argument(
        "--now",
        default=None,
        help="ISO timestamp used as the current time for recency decay"
    )

    # Summary command
    summary_parser = subparsers.add_parser(
        "summary",
        help="Show view/duration statistics and top channels by total views"
    )
    summary_parser.add_argument(
        "input",
        help="Video rows as .json, .jsonl or .csv"
    )

    # API convert command
    convert_parser = subparsers.add_parser(
        "api-convert",
        help="Convert YouTube Data API videos.list/channels.list payloads to video rows"
    )
    convert_parser.add_argument(
        "videos",
        help="JSON file with a videos.list response (or its items list)"
    )
    convert_parser.add_argument(
        "--channels",
        default=None,
        help="JSON file with a channels.list response (or its items list)"
    )
    convert_parser.add_argument(
        "--out",
        required=True,
        help="Output JSON file for the converted rows"
    )

    return parser.parse_args()


def cmd_score(args) -> dict:
    """Execute the score command."""
    now = None
    if args.now:
        now = parse_timestamp(args.now)
        if now is None:
            raise ValueError(f"Invalid --now timestamp: {args.now}")

    records = load_records(args.input)
    report = compute_authority(
        records,
        now=now,
        locale=args.locale,
        video_limit=args.top_videos,
        channel_limit=args.top_channels,
    )

    return {
        "command": "score",
        "input": args.input,
        "total_videos": len(records),
        **report.model_dump(by_alias=True, mode="json"),
    }


def cmd_summary(args) -> dict:
    """Execute the summary command."""
    records = load_records(args.input)
    summary = summarize_run(records)

    return {
        "command": "summary",
        "input": args.input,
        "videos": summary.video_count,
        "avg_views": round(summary.avg_views, 2) if summary.avg_views is not None else None,
        "avg_duration": round(summary.avg_duration, 2) if summary.avg_duration is not None else None,
        "channels": [
            {
                "channel_id": ch.channel_id,
                "title": ch.title,
                "thumbnail_url": ch.thumbnail_url,
                "subscriber_count": ch.subscriber_count,
                "videos_count": ch.videos_count,
                "total_views": ch.total_views,
            }
            for ch in summary.channels
        ],
        "top_videos": [r.to_row() for r in summary.videos],
    }


def cmd_api_convert(args) -> dict:
    """Execute the api-convert command."""
    video_items = items_from_payload(read_json_file(args.videos))
    channel_items: Optional[list] = None
    if args.channels:
        channel_items = items_from_payload(read_json_file(args.channels))

    records = records_from_api(video_items, channel_items)
    with open(args.out, "w", encoding="utf-8") as f:
        json.dump([r.to_row() for r in records], f, ensure_ascii=False, indent=2)

    return {
        "command": "api-convert",
        "items": len(video_items),
        "records": len(records),
        "out": args.out,
    }


def _fmt_count(value) -> str:
    return f"{value:,.0f}" if value is not None else "n/a"


def print_result(result: dict):
    """Print a command result in human-readable form."""
    command = result["command"]
    print(f"\n{'=' * 50}")
    print(f"Command: {command}")
    print(f"{'=' * 50}")

    if command == "score":
        b = result["benchmarks"]
        print(f"Videos scored: {result['total_videos']}")
        print("\nBenchmarks:")
        print(f"  Avg video score:   {b['avgVideoScore']}")
        print(f"  Avg channel score: {b['avgChannelScore']}")
        print(f"  Top video score:   {b['topVideoScore']}")
        print(f"  Top channel score: {b['topChannelScore']}")

        print(f"\nTop videos ({len(result['videos'])}):")
        for i, v in enumerate(result["videos"], 1):
            s = v["signals"]
            print(f"  #{i:>2} [{v['score']:>3}] {v['title'][:60]}")
            print(f"       Channel: {v.get('channelTitle') or v['channelId']}")
            print(f"       depth={s['depth']:.2f} method={s['methodology']:.2f} "
                  f"engage={s['engagement']:.2f} recency={s['recency']:.2f} "
                  f"clickbait={s['clickbaitPenalty']:.2f}")

        print(f"\nTop channels ({len(result['channels'])}):")
        for i, ch in enumerate(result["channels"], 1):
            title = (ch.get("title") or ch["channelId"])[:30]
            print(f"  #{i:>2} [{ch['score']:>3}] {title:<30} "
                  f"avg video {ch['avgVideoScore']:>3} | {_fmt_count(ch.get('subscriberCount'))} subs")

    elif command == "summary":
        avg_duration = result["avg_duration"]
        print(f"Videos: {result['videos']}")
        print(f"Avg views: {_fmt_count(result['avg_views'])}")
        print(f"Avg duration: {f'{avg_duration:.0f}s' if avg_duration is not None else 'n/a'}")
        print("\nTop channels:")
        for ch in result["channels"][:5]:
            print(f"  - {ch['title'] or ch['channel_id']} | "
                  f"{_fmt_count(ch['subscriber_count'])} subs | "
                  f"{_fmt_count(ch['total_views'])} views")
        print("\nTop videos by views:")
        for v in result["top_videos"][:10]:
            print(f"  - {v['title'][:60]} | {_fmt_count(v['view_count'])} views")

    elif command == "api-convert":
        print(f"API items: {result['items']}")
        print(f"Records written: {result['records']}")
        print(f"Output: {result['out']}")

    print(f"{'=' * 50}\n")


def main():
    """Main entry point."""
    args = parse_args()
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        if args.command == "score":
            result = cmd_score(args)
        elif args.command == "summary":
            result = cmd_summary(args)
        else:
            result = cmd_api_convert(args)
    except (FileNotFoundError, ValueError) as e:
        logger.error("%s failed: %s", args.command, e)
        sys.exit(1)

    if args.json:
        print(json.dumps(result, indent=2, ensure_ascii=False))
    else:
        print_result(result)


if __name__ == "__main__":
    main()
