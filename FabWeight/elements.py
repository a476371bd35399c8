"""Element records read from the host model.

Elements are plain snapshots of what the weight calculation needs: the
category, named parameters, the element type with its own parameters and the
specification description of fabrication parts.
"""
from enum import Enum
from serialize import load
from . import logger


class Category(Enum):
    FABRICATION_PART = 'FabricationPart'
    GENERIC_ASSEMBLY = 'GenericAssembly'

    @classmethod
    def from_name(cls, name):
        """Category from its name; anything unknown is a generic assembly."""
        for category in cls:
            if name in (category.value, category.name):
                return category
        logger.debug(f'Category {name!r} treated as generic assembly')
        return cls.GENERIC_ASSEMBLY


class ElementType:
    """Type (family symbol) shared by several elements."""
    def __init__(self, name, parameters=None):
        self.name = name
        self.parameters = dict(parameters or {})

    def __str__(self):
        return f'Type {self.name}'


class Element:
    """Host model element.

    Parameters
    ----------
    id : int or str
        Element identifier.
    category : Category
        Fabrication part or generic assembly.
    parameters : dict
        Instance parameter values by name; None for an unset parameter.
    type : ElementType, optional
        Element type holding type parameters.
    specification : str, optional
        Specification description (fabrication parts only).
    """
    def __init__(self, id, category=Category.GENERIC_ASSEMBLY,
                 parameters=None, type=None, specification=None):
        self.id = id
        self.category = category
        self.parameters = dict(parameters or {})
        self.type = type
        self.specification = specification

    @property
    def is_fabrication_part(self):
        return self.category is Category.FABRICATION_PART

    @classmethod
    def from_dict(cls, data, types=None):
        """Build element from a snapshot record.

        `type` of the record is a name looked up in `types`.
        """
        types = types or {}
        type_name = data.get('type')
        el_type = types.get(type_name) if type_name is not None else None
        if type_name is not None and el_type is None:
            logger.warning(f'Type {type_name!r} of element {data.get("id")} '
                           'not found in snapshot.')
        return cls(data.get('id'),
                   Category.from_name(data.get('category')),
                   parameters=data.get('parameters'),
                   type=el_type,
                   specification=data.get('specification'))

    def __str__(self):
        return f'{self.category.value} {self.id}'


def load_elements(path):
    """Load elements from a YAML or JSON snapshot.

    Snapshot layout::

        types:
          Skid A: {CP_Weight: 15.5}
        elements:
          - {id: 1, category: GenericAssembly, type: Skid A}
          - {id: 2, category: FabricationPart, specification: SCH 40,
             parameters: {Product Entry: 4x2, Length: 10.0}}

    Returns
    -------
    list of Element
    """
    snapshot = load(path) or {}
    types = {name: ElementType(name, params)
             for name, params in (snapshot.get('types') or {}).items()}
    return [Element.from_dict(record, types)
            for record in snapshot.get('elements') or []]
