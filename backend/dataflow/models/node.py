from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Mapping

ValueMap = Dict[str, Any]
RecomputeFunction = Callable[[Mapping[str, Any]], Any]


@dataclass
class Node:
    id: str
    recompute: RecomputeFunction
    dependencies: List[str] = field(default_factory=list)  # ids this node reads from
    dependents: List[str] = field(default_factory=list)  # transitive readers, in global order

    def clone(self) -> "Node":
        """Copy the id lists; the recompute callable is shared."""
        return Node(
            id=self.id,
            recompute=self.recompute,
            dependencies=list(self.dependencies),
            dependents=list(self.dependents),
        )
