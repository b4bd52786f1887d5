"""Hotel record model"""

from pydantic import BaseModel, Field
from typing import Any, List, Mapping, Optional


FEATURE_COUNT = 9


class Hotel(BaseModel):
    """
    A hotel record as stored and served.

    Attribute names are snake_case; the JSON wire names (``_id``,
    ``Hotel_Name``, ``Feature_1`` ...) are the field aliases.
    """
    id: str = Field(alias="_id")
    hotel_name: str = Field(alias="Hotel_Name")
    hotel_rating: float = Field(alias="Hotel_Rating")
    city: str = Field(alias="City")
    feature_1: Optional[str] = Field(default=None, alias="Feature_1")
    feature_2: Optional[str] = Field(default=None, alias="Feature_2")
    feature_3: Optional[str] = Field(default=None, alias="Feature_3")
    feature_4: Optional[str] = Field(default=None, alias="Feature_4")
    feature_5: Optional[str] = Field(default=None, alias="Feature_5")
    feature_6: Optional[str] = Field(default=None, alias="Feature_6")
    feature_7: Optional[str] = Field(default=None, alias="Feature_7")
    feature_8: Optional[str] = Field(default=None, alias="Feature_8")
    feature_9: Optional[str] = Field(default=None, alias="Feature_9")
    hotel_price: float = Field(alias="Hotel_Price")

    class Config:
        populate_by_name = True
        frozen = True

    def features(self) -> List[str]:
        """Non-empty feature values, in order."""
        values = (getattr(self, f"feature_{i}") for i in range(1, FEATURE_COUNT + 1))
        return [value for value in values if value]

    def to_wire(self) -> dict:
        """Serialize with the JSON wire names."""
        return self.model_dump(by_alias=True)

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "Hotel":
        """Create a Hotel from a database row keyed by column name."""
        data = {key: record[key] for key in record.keys()}
        data["id"] = str(data["id"])
        return cls.model_validate(data)
