from dataclasses import dataclass, field
from typing import List, Optional, Tuple

SELECT_ALL = "SELECT * FROM c"


@dataclass(frozen=True)
class Condition:
    """Exact match of one document field against one value or a set of values"""

    field: str
    values: Tuple[str, ...]
    multiple: bool = False

    @property
    def parameter_name(self):
        return f"@{self.field}"

    def to_sql(self):
        if self.multiple:
            return f"ARRAY_CONTAINS({self.parameter_name}, c.{self.field})"
        return f"c.{self.field} = {self.parameter_name}"

    def to_parameter(self):
        value = list(self.values) if self.multiple else self.values[0]
        return {"name": self.parameter_name, "value": value}


def equals(field_name, value):
    return Condition(field_name, (value,))


def one_of(field_name, values):
    return Condition(field_name, tuple(values), multiple=True)


def split_ids(raw):
    """Split a comma-separated ids parameter, dropping blank entries"""
    if not raw:
        return []
    return [part.strip() for part in raw.split(",") if part.strip()]


def _blank_to_none(value):
    if value is None or not value.strip():
        return None
    return value


@dataclass
class UsersQueryParameter:
    ids: List[str] = field(default_factory=list)
    name: Optional[str] = None
    email_address: Optional[str] = None
    user_principal: Optional[str] = None

    @classmethod
    def from_params(cls, params):
        """Build from request query parameters; empty values count as absent"""
        return cls(
            ids=split_ids(params.get("ids")),
            name=_blank_to_none(params.get("name")),
            email_address=_blank_to_none(params.get("emailAddress")),
            user_principal=_blank_to_none(params.get("userPrincipal")),
        )

    def conditions(self):
        conditions = []
        if self.ids:
            conditions.append(one_of("id", self.ids))
        if self.name is not None:
            conditions.append(equals("name", self.name))
        if self.email_address is not None:
            conditions.append(equals("emailAddress", self.email_address))
        if self.user_principal is not None:
            conditions.append(equals("userPrincipal", self.user_principal))
        return conditions

    def build_query(self):
        """Return the SQL text and its parameter list"""
        conditions = self.conditions()
        if not conditions:
            return SELECT_ALL, []

        where = " AND ".join(condition.to_sql() for condition in conditions)
        parameters = [condition.to_parameter() for condition in conditions]
        return f"{SELECT_ALL} WHERE {where}", parameters
