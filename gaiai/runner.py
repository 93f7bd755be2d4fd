# -*- coding: utf-8 -*-
"""
Account processing: one login and the daily tasks per account, in sequence.
"""

import asyncio
import random

from aiohttp import ClientError
from colorama import Fore, Style

from gaiai import console
from gaiai.auth import login, utcnow
from gaiai.client import HttpClient
from gaiai.exceptions import GaiAIError
from gaiai.files import load_private_keys, load_prompts
from gaiai.tasks import complete_prompt, fetch_user_info, get_public_ip, perform_checkin
from gaiai.wallet import generate_address, mask_account


class Runner:
    def __init__(self, config, client=None, sleep=asyncio.sleep, clock=utcnow, rng=random) -> None:
        """
        Runs one cycle over every account in the key file.
         - config: Config with file paths, proxy choice and retry settings
         - client: HttpClient, built from config.timeout when omitted
         - sleep/clock/rng: injectable for tests
        """
        self.config = config
        self.client = client or HttpClient(timeout=config.timeout, sleep=sleep)
        self.sleep = sleep
        self.clock = clock
        self.rng = rng

    def request_options(self, proxy, context):
        return {
            "proxy": proxy,
            "base_url": self.config.base_url,
            "retries": self.config.retries,
            "backoff": self.config.backoff,
            "context": context,
        }

    async def process_account(self, private_key, index, total, prompts, proxy=None):
        """
        Login, check-in, prompt task, task table and profile stats for one account.
        Returns False when the login failed and the account was skipped.
        """
        context = f"Account {index + 1}/{total}"
        console.info(f"{Fore.MAGENTA + Style.BRIGHT}Starting account processing{Style.RESET_ALL}", context)

        console.print_header(f"Account Info {context}")
        ip = await get_public_ip(self.client, proxy, self.config.retries, self.config.backoff, context)
        console.print_info("IP", ip, context)

        address = generate_address(private_key)
        if address is None:
            console.warn(f"Invalid private key format for address computation: {mask_account(private_key)}", context)
        console.print_info("Address", address or "N/A", context)

        options = self.request_options(proxy, context)
        try:
            session = await login(self.client, private_key, clock=self.clock, **options)
        except GaiAIError as e:
            console.error(f"Skipping account due to login error: {e}", context)
            return False

        console.info("Starting check-in process...", context)
        checkin = await perform_checkin(self.client, session.token, **options)

        console.info("Starting prompt completion process...", context)
        prompt = await complete_prompt(self.client, session.token, prompts, rng=self.rng, **options)

        tasks = [
            {"name": "Daily Check-in", "type": "Checkin",
             "credit": checkin.data.get("gPoints") or 0, "completed": checkin.ok},
            {"name": "Generate Prompt", "type": "Prompt",
             "credit": prompt.data.get("rewardVal") or 0, "completed": prompt.ok},
        ]
        console.print_task_table(tasks, context)

        console.print_header(f"Account Stats {context}")
        user = await fetch_user_info(self.client, session.token, **options)
        console.print_info("Username", user["username"], context)
        console.print_info("G Points", user["gPoints"], context)

        console.info(f"{Fore.GREEN + Style.BRIGHT}Completed account processing{Style.RESET_ALL}", context)
        return True

    async def run_cycle(self):
        """One pass over all accounts. Returns the number of accounts attempted."""
        private_keys = load_private_keys(self.config.pk_file)
        if not private_keys:
            console.error(f"No private keys found in {self.config.pk_file}. Exiting cycle.")
            return 0
        prompts = load_prompts(self.config.prompt_file)
        if not prompts:
            console.error(f"No prompts found in {self.config.prompt_file}. Exiting cycle.")
            return 0

        total = len(private_keys)
        for index, private_key in enumerate(private_keys):
            proxy = self.config.proxy_for(index)
            try:
                await self.process_account(private_key, index, total, prompts, proxy)
            except (Exception, ClientError) as e:
                console.error(f"Error processing account: {e}", f"Account {index + 1}/{total}")
            if index < total - 1:
                print("\n")
            await self.sleep(self.config.account_delay)
        return total
