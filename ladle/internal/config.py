import configparser
import os
from colorama import Fore, Back, Style, init
init(autoreset=True)


DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8080
DEFAULT_ORIGINS = [
    "http://localhost",
    "http://localhost:8080",
]
DEFAULT_PALETTE_COUNT = 5


class Config:
    def __init__(self, config_filepath: str):
        print(f"[Config] Starting to read '{config_filepath}'")
        self._config_filepath = config_filepath
        config = configparser.ConfigParser()
        try:
            _ = config.read(config_filepath)
        except configparser.Error as e:
            print(f"[Config] {Back.RED + Style.BRIGHT}|!!| ERROR! Couldn't parse '{config_filepath}': {e} |!!|")
            print(f"[Config] {Fore.YELLOW}|::| Using default settings")
            config.clear()

        if not os.path.isfile(config_filepath):
            print(f"[Config] {Fore.YELLOW}|::| Warning! '{config_filepath}' not found, using default settings")
            print("Perhaps, you put in the wrong file path?")

        #Load [SERVER] section
        if config.has_section("SERVER"):
            self._host: str = config["SERVER"].get("host", DEFAULT_HOST).strip() or DEFAULT_HOST
            self._port: int = self._read_int(config["SERVER"], "port", DEFAULT_PORT)
            self._hotreload: bool = self._read_bool(config["SERVER"], "hotreload", False)
        else:
            print(f"[Config] {Fore.YELLOW}|::| Warning! SERVER section not found in {config_filepath}!")
            self._host = DEFAULT_HOST
            self._port = DEFAULT_PORT
            self._hotreload = False
        print(f"[Config] Server: {self._host}:{self._port}, hot reload: {self._hotreload}")

        #Load [CORS] section
        self._origins: list[str] = list(DEFAULT_ORIGINS)
        if config.has_section("CORS") and "origins" in config["CORS"]:
            origins = [o.strip() for o in config["CORS"]["origins"].split(",") if o.strip()]
            if origins:
                self._origins = origins
            else:
                print(f"[Config] {Fore.YELLOW}|::| Warning! CORS origins list in {config_filepath} is empty, using defaults")
        print(f"[Config] Allowed origins: {', '.join(self._origins)}")

        #Load [PALETTE] section
        self._default_palette_count: int = DEFAULT_PALETTE_COUNT
        if config.has_section("PALETTE"):
            count = self._read_int(config["PALETTE"], "default_count", DEFAULT_PALETTE_COUNT)
            self._default_palette_count = max(count, 1)
            if count < 1:
                print(f"[Config] {Fore.YELLOW}|::| Warning! default_count in {config_filepath} is lower than 1! Clamped to 1")
        print(f"[Config] Default palette size: {self._default_palette_count}")

        print(f"[Config] Ready")

    @property
    def config_filepath(self) -> str:
        return self._config_filepath

    @property
    def host(self) -> str:
        return self._host

    @property
    def port(self) -> int:
        return self._port

    @property
    def hotreload(self) -> bool:
        return self._hotreload

    @property
    def origins(self) -> list[str]:
        return list(self._origins)

    @property
    def default_palette_count(self) -> int:
        return self._default_palette_count

    @staticmethod
    def _read_int(section: configparser.SectionProxy, key: str, default: int) -> int:
        try:
            return section.getint(key, default)
        except ValueError:
            print(f"[Config] {Fore.YELLOW}|::| Warning! '{key}' = '{section[key]}' is not a number, using {default}")
            return default

    @staticmethod
    def _read_bool(section: configparser.SectionProxy, key: str, default: bool) -> bool:
        try:
            return section.getboolean(key, default)
        except ValueError:
            print(f"[Config] {Fore.YELLOW}|::| Warning! '{key}' = '{section[key]}' is not a boolean, using {default}")
            return default
