from dataclasses import dataclass
from typing import List, Dict, Set, Tuple
from pydantic import BaseModel, Field, validator


class Place(BaseModel):
    """A named place on the map. Coordinates are display metadata only."""
    name: str = Field(..., min_length=1)
    lat: float = 0.0
    lng: float = 0.0

    class Config:
        frozen = True


class Road(BaseModel):
    """Undirected road between two places, as served by the ride API."""
    from_: str = Field(..., alias="from")
    to: str
    cost: float = Field(..., gt=0)

    class Config:
        frozen = True
        populate_by_name = True

    @property
    def endpoints(self) -> Tuple[str, str]:
        return self.from_, self.to

    def cost_label(self) -> str:
        """Exact shortest form of the cost: 4.0 -> '4', 12.3456789 -> '12.3456789'"""
        cost = float(self.cost)
        return str(int(cost)) if cost.is_integer() else repr(cost)


class GraphSnapshot(BaseModel):
    """Immutable places + roads for one render pass."""
    places: List[Place] = Field(default_factory=list)
    roads: List[Road] = Field(default_factory=list)

    class Config:
        frozen = True

    @validator('places')
    def unique_place_names(cls, v: List[Place]) -> List[Place]:
        seen: Set[str] = set()
        for place in v:
            if place.name in seen:
                raise ValueError(f"Duplicate place name: {place.name}")
            seen.add(place.name)
        return v

    @property
    def names(self) -> List[str]:
        return [p.name for p in self.places]

    def dangling_roads(self) -> List[Road]:
        """Roads that reference a place missing from the snapshot."""
        known = set(self.names)
        return [r for r in self.roads if r.from_ not in known or r.to not in known]


class RouteResult(BaseModel):
    """Route query result. An empty path means no route was found."""
    path: List[str] = Field(default_factory=list)
    total_cost: float = Field(0.0, alias="totalCost")

    class Config:
        frozen = True
        populate_by_name = True

    @property
    def found(self) -> bool:
        return len(self.path) > 0


@dataclass(frozen=True)
class NodePosition:
    """Pixel position of a node, origin top-left, y growing downward."""
    x: float
    y: float

    def as_dict(self) -> Dict[str, float]:
        return {"x": self.x, "y": self.y}
