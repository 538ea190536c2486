import argparse
import logging
import sys

from scene_manager import SceneManager
from game_context import COLLISION_MODES, DuelConfig, GameContext
from duel.game import DuelScene, TITLE


def build_parser():
    parser = argparse.ArgumentParser(description="Two-player same-keyboard sprite duel.")
    parser.add_argument("--collision", choices=COLLISION_MODES, default="block",
                        help="block: players stack and block each other; "
                             "contact: overlapping players both lose health")
    parser.add_argument("--max-jumps", type=int, default=2)
    parser.add_argument("--max-health", type=int, default=20)
    parser.add_argument("--fps", type=int, default=60)
    parser.add_argument("--assets", default="assets", help="sprite folder")
    parser.add_argument("--frames", type=int, default=None,
                        help="quit after this many frames")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser


def config_from_args(args, parser=None):
    config = DuelConfig(
        fps=args.fps,
        max_jumps=args.max_jumps,
        max_health=args.max_health,
        collision_mode=args.collision,
        asset_dir=args.assets,
    )
    try:
        return config.validate()
    except ValueError as exc:
        if parser is None:
            raise
        parser.error(str(exc))


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
    )

    context = GameContext(config_from_args(args, parser))
    manager = SceneManager(
        DuelScene,
        context=context,
        size=context.config.size,
        fps=context.config.fps,
        caption=TITLE,
    )
    manager.run(max_frames=args.frames)
    return 0


if __name__ == "__main__":
    sys.exit(main())
