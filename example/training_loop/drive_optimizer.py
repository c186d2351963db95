"""
Drives a toy optimizer's learning rate and momentum from two schedules.

The optimizer here is a plain object with mutable fields; binding a stream to a real
framework's optimizer follows the same pattern of one `next()` per training step.
"""

import dataclasses
import logging

from stepwise.core import build_logger
from stepwise.schedule import CosAnneal, Exp, Loop, ScheduleConfig, Sequence, schedule_from_config, warmup
from stepwise.sequence import to_sequence

TOTAL_STEPS = 60


@dataclasses.dataclass
class ToyOptimizer:
    lr: float = 0.0
    momentum: float = 0.0


def main():
    logger = build_logger(logging.DEBUG)

    lr_schedule = warmup(
        Sequence([
            (Loop(CosAnneal(1e-4, 1e-2, 10), period=10, repeats=3), 30),
            (Exp(1e-3, 0.95), 30)
        ]),
        steps=5
    )
    momentum_config = ScheduleConfig.model_validate({
        "schedule": {"type": "triangle", "l0": 0.85, "l1": 0.95, "period": 20}
    })
    momentum_schedule = schedule_from_config(momentum_config.schedule)

    optimizer = ToyOptimizer()
    lr_stream = to_sequence(lr_schedule)
    momentum_stream = to_sequence(momentum_schedule)

    for step in range(1, TOTAL_STEPS + 1):
        optimizer.lr = next(lr_stream)
        optimizer.momentum = next(momentum_stream)
        if step % 10 == 0:
            logger.info("step=%d lr=%.6f momentum=%.3f", step, optimizer.lr, optimizer.momentum)

    checkpoint = lr_stream.state_dict()
    logger.info("Saved learning rate stream state: %s", checkpoint)


if __name__ == "__main__":
    main()
