# -*- coding: utf-8 -*-
"""
Run configuration. Defaults can be overridden with GAIAI_* variables,
read from the environment or a .env file.
"""

import os

from colorama import Fore, Style
from dotenv import load_dotenv

from gaiai import console
from gaiai.auth import BASE_URL
from gaiai.files import load_proxies, proxy_for_index


class Config:
    def __init__(self, base_url=BASE_URL, pk_file="pk.txt", proxy_file="proxy.txt", prompt_file="prompt.txt",
                 use_proxy=False, proxies=None, retries=3, backoff=2.0, timeout=60,
                 account_delay=5, cycle_interval=24 * 60 * 60) -> None:
        self.base_url = base_url
        self.pk_file = pk_file
        self.proxy_file = proxy_file
        self.prompt_file = prompt_file
        self.use_proxy = use_proxy
        self.proxies = list(proxies or [])
        self.retries = retries
        self.backoff = backoff
        self.timeout = timeout
        self.account_delay = account_delay
        self.cycle_interval = cycle_interval

    @classmethod
    def from_env(cls, env_file=".env"):
        """Build a Config from GAIAI_* environment variables."""
        load_dotenv(env_file)
        return cls(
            base_url=os.getenv("GAIAI_BASE_URL", BASE_URL),
            pk_file=os.getenv("GAIAI_PK_FILE", "pk.txt"),
            proxy_file=os.getenv("GAIAI_PROXY_FILE", "proxy.txt"),
            prompt_file=os.getenv("GAIAI_PROMPT_FILE", "prompt.txt"),
            retries=int(os.getenv("GAIAI_RETRIES", "3")),
            backoff=float(os.getenv("GAIAI_BACKOFF", "2.0")),
            timeout=int(os.getenv("GAIAI_TIMEOUT", "60")),
            account_delay=float(os.getenv("GAIAI_ACCOUNT_DELAY", "5")),
            cycle_interval=float(os.getenv("GAIAI_CYCLE_INTERVAL", str(24 * 60 * 60)))
        )

    def proxy_for(self, index):
        if not self.use_proxy:
            return None
        return proxy_for_index(self.proxies, index)


def ask_use_proxy(input_func=input):
    """Ask y/n until the answer is one of them."""
    while True:
        answer = input_func(f"{Fore.BLUE + Style.BRIGHT}Do You Want Use Proxy? [y/n] -> {Style.RESET_ALL}")
        answer = answer.strip().lower()
        if answer in ["y", "n"]:
            return answer == "y"
        print(f"{Fore.RED + Style.BRIGHT}Invalid input. Enter 'y' or 'n'.{Style.RESET_ALL}")


def initialize_config(config: Config, input_func=input) -> Config:
    """Apply the proxy choice; proxies are disabled when none could be loaded."""
    if ask_use_proxy(input_func):
        config.use_proxy = True
        config.proxies = load_proxies(config.proxy_file)
        if not config.proxies:
            config.use_proxy = False
            console.warn("No proxies available, proceeding without proxy.")
    else:
        config.use_proxy = False
        config.proxies = []
        console.info("Proceeding without proxy.")
    return config
