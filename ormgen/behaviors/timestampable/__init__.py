from dataclasses import dataclass

from ormgen.behaviors.timestampable.behaviors.base import Behavior
from ormgen.behaviors.timestampable.behaviors.timestampable import TimestampableBehavior
from ormgen.include import timestampable


@dataclass(frozen=True)
class BehaviorPlugin:
    name: str
    behavior: type[Behavior]
    include_path: str


Plugin = BehaviorPlugin(
    name=TimestampableBehavior.name,
    behavior=TimestampableBehavior,
    include_path=timestampable.PACKAGE_PATH,
)
