import json
from abc import ABC, abstractmethod
from typing import Dict

import yaml


class Parser(ABC):
    """Abstract class for parsers."""

    @staticmethod
    @abstractmethod
    def load(file: str) -> Dict:
        """Load data from a file.

        Parameters
        ----------
        file : str
            file path

        Returns
        -------
        Dict
            data
        """
        pass

    @staticmethod
    @abstractmethod
    def dump(data: Dict, file: str) -> None:
        """Dump data to a file.

        Parameters
        ----------
        data : Dict
            data to dump
        file : str
            file path
        """
        pass


class YamlParser(Parser):
    """YAML parser."""

    @staticmethod
    def load(file: str) -> Dict:
        with open(file, "r") as stream:
            return yaml.safe_load(stream)

    @staticmethod
    def dump(data: Dict, file: str) -> None:
        with open(file, "w") as stream:
            yaml.safe_dump(data, stream, sort_keys=False)


class JsonParser(Parser):
    """JSON parser."""

    @staticmethod
    def load(file: str) -> Dict:
        with open(file, "r") as stream:
            return json.load(stream)

    @staticmethod
    def dump(data: Dict, file: str) -> None:
        with open(file, "w") as stream:
            json.dump(data, stream, indent=2)


PARSERS = {
    ".yaml": YamlParser,
    ".yml": YamlParser,
    ".json": JsonParser,
}
