"""
Angle Arithmetic Example
========================

This example shows how the mathlib angle types are meant to be combined in
numeric code.

It shows:
- Building angles in degrees and radians
- Comparing angles across units
- How the right-hand operand decides the unit of a mixed-unit result
- Switching the default precision through the environment

Run with DEBUG=1 to see the unit coercions logged.
"""

from environs import Env

from mathlib.logging_config import get_logger, setup_logging
from mathlib.trig import PI64, DegreeAngle, RadianAngle

logger = get_logger(__name__)


def main() -> None:
    env = Env()
    env.read_env()
    setup_logging(env)

    quarter_turn = RadianAngle(0.5 * PI64)
    ninety = DegreeAngle(90.0)

    logger.info(f"{quarter_turn!r} == {ninety!r}: {quarter_turn == ninety}")

    # RHS has preference over LHS
    as_radians = ninety + quarter_turn
    as_degrees = quarter_turn + ninety
    logger.info(f"DegreeAngle + RadianAngle -> {as_radians!r}")
    logger.info(f"RadianAngle + DegreeAngle -> {as_degrees!r}")

    ratio = ninety / quarter_turn
    logger.info(f"DegreeAngle / RadianAngle -> {ratio!r}")


if __name__ == "__main__":
    main()
