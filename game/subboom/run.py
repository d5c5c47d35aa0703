"""
Command line entry point: windowed play or headless random / scripted runs

    python -m game.subboom                      # play in a window
    python -m game.subboom --headless --frames 600 --seed 1
    python -m game.subboom --headless --script "L,L,B,-,R+B" --dump-frame last.png
"""

import argparse
import logging
import random
from typing import List, Optional, Sequence

from . import config as C
from .pacing import FramePacer
from .render import save_frame
from .sim import InputCommand, RoundState, SubBoomSim

logger = logging.getLogger(__name__)

# weights for the random headless driver
RANDOM_COMMANDS = [
    (InputCommand.NONE, 6),
    (InputCommand.MOVE_LEFT, 3),
    (InputCommand.MOVE_RIGHT, 3),
    (InputCommand.DROP_BOMB, 1),
]


def parse_script(text: str) -> List[List[InputCommand]]:
    """'L,L,B+R,-' -> one command list per tick; '+' joins same-tick commands"""
    return [
        [InputCommand.parse(token) for token in tick.split("+")]
        for tick in text.split(",")
    ]


def random_commands(rng: random.Random) -> List[InputCommand]:
    commands, weights = zip(*RANDOM_COMMANDS)
    return [rng.choices(commands, weights=weights)[0]]


def run_headless(
    sim: SubBoomSim,
    frames: int,
    script: Optional[Sequence[List[InputCommand]]] = None,
    seed: Optional[int] = None,
) -> dict:
    """Step `frames` ticks with scripted commands, or random ones when no script"""
    rng = random.Random(seed)
    rounds_lost = 0
    for i in range(frames):
        if script is not None:
            commands = script[i] if i < len(script) else []
        else:
            commands = random_commands(rng)
        result = sim.step(commands)
        if result.round_state is RoundState.ROUND_OVER:
            rounds_lost += 1
        elif result.round_state is RoundState.EXIT:
            break
    summary = sim.info()
    summary["rounds_lost"] = rounds_lost
    return summary


def run_random_game(frames: int = 900, seed: Optional[int] = None) -> dict:
    """Headless game driven by random input"""
    sim = SubBoomSim(seed=seed)
    return run_headless(sim, frames, seed=seed)


def run_windowed(sim: SubBoomSim):
    """Poll input, step, draw, then sleep out the rest of the frame"""
    from .window import SubBoomWindow  # needs a display

    window = SubBoomWindow(sim.config.display_width, sim.config.display_height)
    pacer = FramePacer(sim.config.ms_per_frame)
    try:
        while True:
            pacer.start()
            window.dispatch_events()
            result = sim.step(window.poll_commands())
            if result.round_state is RoundState.EXIT:
                break
            if result.round_state is RoundState.PLAYING:
                window.show(result.draw_commands)
            pacer.finish()
    finally:
        window.close()
    logger.info("Window closed after %d rounds (%d slow frames)", sim.round_number, pacer.overruns)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Sub Boom! destroyer vs submarines")
    parser.add_argument("--headless", action="store_true", help="Run without a window")
    parser.add_argument("--frames", type=int, default=900, help="Ticks to run headless")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--fps", type=int, default=C.FPS)
    parser.add_argument("--width", type=int, default=C.DISPLAY_WIDTH)
    parser.add_argument("--height", type=int, default=C.DISPLAY_HEIGHT)
    parser.add_argument("--script", type=str, default=None,
                        help="Comma separated commands per tick, e.g. 'L,L,B+R,-'")
    parser.add_argument("--dump-frame", type=str, default=None,
                        help="Save the last headless frame to this image file")
    parser.add_argument("--log-level", type=str, default="WARNING")
    return parser


def main(argv: Optional[Sequence[str]] = None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    sim_config = dict(C.SIM_CONFIG, fps=args.fps, display_width=args.width,
                      display_height=args.height)
    sim = SubBoomSim(seed=args.seed, **sim_config)

    if not args.headless:
        run_windowed(sim)
        return

    script = parse_script(args.script) if args.script else None
    summary = run_headless(sim, args.frames, script=script, seed=args.seed)

    print(f"\n{'='*60}")
    print(f"Ran {summary['tick']} ticks of round {summary['round']} "
          f"({summary['rounds_lost']} rounds lost)")
    print(f"Submarines: {summary['num_submarines']}  Bombs: {summary['num_bombs']}  "
          f"Missiles: {summary['num_missiles']}  Explosions: {summary['num_explosions']}")
    print(f"{'='*60}\n")

    if args.dump_frame:
        save_frame(sim.render("rgb_array"), args.dump_frame)
        print(f"Saved frame to {args.dump_frame}")


if __name__ == "__main__":
    main()
