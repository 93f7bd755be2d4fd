#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
GaiAI Auto Daily BOT v1.0
Daily check-in and prompt task for every wallet in pk.txt, with optional proxies.
"""

import asyncio
from datetime import datetime

from colorama import Fore, Style

from gaiai import console
from gaiai.config import Config, initialize_config
from gaiai.runner import Runner
from gaiai.scheduler import Scheduler


async def main(config=None):
    """
    Main entry:
     - Banner and proxy choice
     - Daily cycle over all accounts, forever
    """
    console.clear_terminal()
    console.welcome()

    config = initialize_config(config or Config.from_env())
    console.log("=" * 80)

    runner = Runner(config)
    scheduler = Scheduler(runner.run_cycle, interval=config.cycle_interval)
    await scheduler.run()


def run():
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        print(
            f"\n{Fore.LIGHTCYAN_EX}[{datetime.now().astimezone(console.WIB).strftime('%H:%M:%S')}] "
            f"{Fore.RED}[ EXIT ] GaiAI Auto Daily BOT stopped.{Style.RESET_ALL}\n"
        )
    except Exception as e:
        console.error(f"Fatal error: {e}")
        raise


if __name__ == "__main__":
    run()
