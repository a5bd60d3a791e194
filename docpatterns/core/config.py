"""
Configuration of the docpatterns demo.
"""
import os
import copy
import json
import logging
from typing import Any, Dict, Mapping, Optional, Tuple

import jsonschema

logger = logging.getLogger(__name__)


class DemoConfiguration:
    """Settings of one demo run, validated against a JSON schema.

    Parameters
    ----------
    **params
        Values overriding the defaults; see `DemoConfiguration.DEFAULTS`.

    Raises
    ------
    `jsonschema.exceptions.ValidationError`
        If the resulting parameters do not conform to the JSON schema.
    """

    SCHEMA_FILE = "configuration_schema.json"

    DEFAULTS: Dict[str, Any] = {
        "doc_type": "PDF",
        "strategy": "print",
        "documents": ["PDF", "TXT"],
        "supported_formats": ["PDF", "TXT", "DOCX"],
        "pause": True,
    }

    def __init__(self, **params) -> None:
        parameters = copy.deepcopy(self.DEFAULTS)
        parameters.update(params)
        self.__params = self.validate(parameters)
        logger.debug(f"Demo configuration: {self.__params}")

    @classmethod
    def from_dict(cls, params: Mapping[str, Any]) -> "DemoConfiguration":
        """Create a configuration from a mapping of parameters."""
        return cls(**params)

    @staticmethod
    def config_schema() -> dict:
        """Static method returning the JSON validation schema of the class."""
        path = os.path.dirname(os.path.abspath(__file__))
        with open(os.path.join(path, DemoConfiguration.SCHEMA_FILE), "r") as fp:
            config_schema = json.load(fp)
        return config_schema

    @classmethod
    def validate(cls, params: Mapping[str, Any]) -> dict:
        """Validate parameters against the JSON schema.

        Parameters
        ----------
        params : Mapping[str, Any]
            Parameters to be tested.

        Returns
        -------
        dict
            Validated parameters

        Raises
        ------
        `jsonschema.exceptions.ValidationError`
            If the parameters do not conform to the JSON schema.
        """
        params = copy.deepcopy(dict(params))
        jsonschema.validate(params, cls.config_schema())
        return params

    @property
    def doc_type(self) -> str:
        """str : Type label submitted to the chain of checks"""
        return self.__params["doc_type"]

    @property
    def strategy(self) -> Optional[str]:
        """str or None : Name of the processing strategy; None if no strategy is selected"""
        return self.__params["strategy"]

    @property
    def documents(self) -> Tuple[str, ...]:
        """Tuple[str, ...] : Type labels of the documents sent to the display visitor"""
        return tuple(self.__params["documents"])

    @property
    def supported_formats(self) -> Tuple[str, ...]:
        """Tuple[str, ...] : Format labels accepted by the format checker"""
        return tuple(self.__params["supported_formats"])

    @property
    def pause(self) -> bool:
        """bool : Wait for user input before exiting?"""
        return self.__params["pause"]

    def to_dict(self) -> Dict[str, Any]:
        return copy.deepcopy(self.__params)

    def __repr__(self) -> str:
        args = ", ".join(f"{key}={value!r}" for key, value in self.__params.items())
        return f"{type(self).__name__}({args})"
