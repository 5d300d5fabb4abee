import os
from typing import ClassVar, Optional


class GlobalState:
    """Global state is a bad idea, but since the host pipeline controls instantiation, better to
    have it in a single place than scattered throughout the codebase.
    """

    __strict_parameters: ClassVar[Optional[bool]] = None

    @classmethod
    def get_strict_parameters(cls) -> bool:
        if cls.__strict_parameters is None:
            cls.__strict_parameters = (
                os.getenv("ORMGEN_STRICT_BEHAVIOR_PARAMETERS", "False").upper() == "TRUE"
            )
        return cls.__strict_parameters

    @classmethod
    def reset(cls) -> None:
        cls.__strict_parameters = None
