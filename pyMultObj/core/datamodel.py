"""Basic Model for all pyMultObj Datastructures."""

from typing import Any
import numpy as np
from pydantic import (
    AliasGenerator,
    BaseModel,
    ConfigDict,
)
from pydantic.alias_generators import to_camel


class PyMultObjBaseModel(BaseModel):
    """
    Base class for all pyMultObj data structures.

    Extends Pydantic's BaseModel to use pydantic validation and serialization.

    Attributes
    ----------
    model_config : ConfigDict
        Configuration for the model, including alias generation, population by
        name, arbitrary types allowed, assignment validation, and attribute
        creation from dictionary.
    """

    model_config = ConfigDict(
        alias_generator=AliasGenerator(alias=to_camel),
        populate_by_name=True,  # Allows both snake_case and camelCase attributes
        arbitrary_types_allowed=True,  # Allows arbitrary types in the model (will be casted)
        validate_assignment=True,  # Validate assignment of values to fields
        # (not only during construction)
        from_attributes=True,  # Allows to create a model from a dictionary
    )

    def __eq__(self, other: Any) -> bool:
        """
        Specialized __eq__ method to compare two PyMultObjBaseModel instances.

        Compares the field dictionaries recursively, numpy arrays by value.
        Private attributes are not compared, they are derived from the fields.
        """
        if type(self) is not type(other):
            return False

        stack = [(self.__dict__, other.__dict__)]
        while stack:
            dict_a, dict_b = stack.pop()
            if dict_a.keys() != dict_b.keys():
                return False
            for key in dict_a:
                if isinstance(dict_a[key], dict) and isinstance(dict_b[key], dict):
                    stack.append((dict_a[key], dict_b[key]))
                elif isinstance(dict_a[key], np.ndarray) or isinstance(dict_b[key], np.ndarray):
                    if not np.array_equal(dict_a[key], dict_b[key]):
                        return False
                elif dict_a[key] != dict_b[key]:
                    return False
        return True

    def __ne__(self, other: Any) -> bool:
        """
        Specialized __ne__ method to compare two PyMultObjBaseModel instances.

        This method returns the negation of the __eq__ method.
        """
        if isinstance(other, self.__class__):
            return not self.__eq__(other)
        else:
            return True

    def to_dict(self, by_alias: bool = False) -> dict[str, Any]:
        """
        Dump the model into a plain dictionary.

        Parameters
        ----------
        by_alias : bool, optional
            Whether to use the camelCase aliases as keys, by default False.

        Returns
        -------
        dict[str, Any]
            The model data.
        """
        return self.model_dump(by_alias=by_alias)
