# -*- coding: utf-8 -*-
import asyncio

from colorama import Fore, Style

from gaiai import console


class Scheduler:
    """
    Repeats a cycle forever with a fixed pause in between.
    `max_cycles` stops the loop after that many cycles (None means never).
    """

    def __init__(self, run_cycle, interval=24 * 60 * 60, sleep=asyncio.sleep, max_cycles=None) -> None:
        self.run_cycle = run_cycle
        self.interval = interval
        self.sleep = sleep
        self.max_cycles = max_cycles
        self.cycles = 0

    async def run(self):
        while self.max_cycles is None or self.cycles < self.max_cycles:
            await self.run_cycle()
            self.cycles += 1
            console.info(
                f"{Fore.YELLOW + Style.BRIGHT}Cycle completed. "
                f"Waiting {console.format_seconds(self.interval)}...{Style.RESET_ALL}"
            )
            await self.sleep(self.interval)
        return self.cycles
