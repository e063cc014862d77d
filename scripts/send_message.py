#!/usr/bin/env python3
"""
Send a one-off message through the configured DingTalk robot.

Reads DINGTALK_ACCESS_TOKEN / DINGTALK_URL, DINGTALK_SECRET and the other
DINGTALK_* settings from the environment or .env.

Usage:
    python scripts/send_message.py "build #42 passed"
    python scripts/send_message.py --title "Deploy" "**api** is live"
"""

import argparse
import asyncio
import logging
import sys

from pydantic import ValidationError

from dingrobot import Robot, RobotError, RobotSettings


async def send(args: argparse.Namespace, settings: RobotSettings) -> bool:
    async with Robot.from_settings(settings) as robot:
        if not robot.enabled:
            print("WARNING: no robot url configured, nothing was sent.", file=sys.stderr)
            return False
        if args.title:
            await robot.markdown(args.title, args.message)
        else:
            await robot.text(args.message)
    return True


def main() -> int:
    parser = argparse.ArgumentParser(description="Send a message through the configured DingTalk robot.")
    parser.add_argument("message", help="Message body (markdown when --title is given)")
    parser.add_argument("--title", help="Send a markdown message with this title")
    args = parser.parse_args()

    settings = RobotSettings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        sent = asyncio.run(send(args, settings))
    except RobotError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1
    except ValidationError as exc:
        print(f"ERROR: invalid robot configuration\n{exc}", file=sys.stderr)
        return 2
    if sent:
        print("Message sent.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
