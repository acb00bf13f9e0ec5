#!/usr/bin/env python3
"""Run the beat cycle in the terminal and print the highlighted bols each beat.

Usage:
    python scripts/practice_metronome.py --taal Dadra --tempo 120 --cycles 2
"""

import argparse
import asyncio
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "src"))

from lotus_riyaaz.settings import configure_logging
from lotus_riyaaz.tala.beat_cycle import BeatCycleEngine
from lotus_riyaaz.tala.models import TaalName, get_taal
from lotus_riyaaz.tala.notation import render_cycle_text


async def run(taal_name: str, tempo: int, cycles: int) -> None:
    taal = get_taal(taal_name)
    engine = BeatCycleEngine(taal, tempo)
    done = asyncio.Event()
    beats = 0

    @engine.on_tick
    def _print_beat(beat_index: int) -> None:
        nonlocal beats
        beats += 1
        print(f"{beat_index:>2}  {render_cycle_text(taal, beat_index)}")
        if beats >= cycles * taal.matras:
            done.set()

    print(f"{taal.name}: {taal.matras} matras at {tempo} bpm")
    print(f"{0:>2}  {render_cycle_text(taal, engine.beat_index)}")
    engine.start()
    try:
        await done.wait()
    finally:
        engine.stop()


def main() -> None:
    parser = argparse.ArgumentParser(description="Terminal tāl metronome")
    parser.add_argument(
        "--taal", default=TaalName.TEENTAAL.value,
        choices=[t.value for t in TaalName],
    )
    parser.add_argument("--tempo", type=int, default=90, help="Beats per minute")
    parser.add_argument("--cycles", type=int, default=1, help="Full cycles to play")
    parser.add_argument("--log-level", default="WARNING")
    args = parser.parse_args()

    if args.tempo <= 0:
        parser.error("--tempo must be positive")

    configure_logging(args.log_level.upper())
    try:
        asyncio.run(run(args.taal, args.tempo, args.cycles))
    except KeyboardInterrupt:
        print()


if __name__ == "__main__":
    main()
