import enum
from typing import List, Iterator, Optional

from .utils import NO_VALUE


@enum.unique
class ValueType(enum.Enum):
    BOOLEAN = enum.auto()
    INTEGER = enum.auto()
    FLOAT = enum.auto()
    STRING = enum.auto()
    ARRAY = enum.auto()


_PYTHON_TYPES = {
    ValueType.BOOLEAN: bool,
    ValueType.INTEGER: int,
    ValueType.FLOAT: float,
    ValueType.STRING: str,
    ValueType.ARRAY: list,
}


class Value:
    """A literal of the configuration language.

    Parameters:
        type_: a ``ValueType``
        value: ``bool``, ``int``, ``float``, ``str``, or a list of ``Value`` for arrays.
            Arrays may mix element types.
    """
    __slots__ = ('type', 'value')

    type: ValueType

    def __init__(self, type_: ValueType, value) -> None:
        expected = _PYTHON_TYPES[type_]
        if type(value) is not expected:
            raise TypeError("%s value must be of type %s, got %r" % (type_.name, expected.__name__, value))
        if type_ is ValueType.ARRAY:
            if not all(isinstance(v, Value) for v in value):
                raise TypeError("ARRAY elements must be Value instances, got %r" % (value,))
        self.type = type_
        self.value = value

    @classmethod
    def boolean(cls, value: bool) -> 'Value':
        return cls(ValueType.BOOLEAN, value)

    @classmethod
    def integer(cls, value: int) -> 'Value':
        return cls(ValueType.INTEGER, value)

    @classmethod
    def float(cls, value: float) -> 'Value':
        return cls(ValueType.FLOAT, value)

    @classmethod
    def string(cls, value: str) -> 'Value':
        return cls(ValueType.STRING, value)

    @classmethod
    def array(cls, values: 'List[Value]') -> 'Value':
        return cls(ValueType.ARRAY, list(values))

    def to_python(self):
        "Returns the value as plain Python objects (arrays become lists)"
        if self.type is ValueType.ARRAY:
            return [v.to_python() for v in self.value]
        return self.value

    def __repr__(self):
        return 'Value(%s, %r)' % (self.type.name, self.value)

    def __str__(self):
        if self.type is ValueType.ARRAY:
            return '[%s]' % ', '.join(str(v) for v in self.value)
        elif self.type is ValueType.BOOLEAN:
            return 'true' if self.value else 'false'
        elif self.type is ValueType.STRING:
            return '"%s"' % self.value.encode('unicode_escape').decode('ascii').replace('"', '\\"')
        return repr(self.value)

    def __eq__(self, other):
        try:
            return self.type is other.type and self.value == other.value
        except AttributeError:
            return False

    def __ne__(self, other):
        return not (self == other)

    def __hash__(self):
        if self.type is ValueType.ARRAY:
            return hash((self.type, tuple(self.value)))
        return hash((self.type, self.value))


class Variable:
    __slots__ = ('name', 'value')

    def __init__(self, name: str, value: Value) -> None:
        self.name = name
        self.value = value

    def __repr__(self):
        return 'Variable(%r, %r)' % (self.name, self.value)

    def __eq__(self, other):
        try:
            return self.name == other.name and self.value == other.value
        except AttributeError:
            return False

    def __ne__(self, other):
        return not (self == other)

    def __hash__(self):
        return hash((self.name, self.value))


def _lookup(variables, name, default):
    for var in variables:
        if var.name == name:
            return var.value
    if default is NO_VALUE:
        raise KeyError(name)
    return default


def _pretty_variables(variables, level, indent_str):
    return ['%s%s = %s\n' % (indent_str * level, var.name, var.value) for var in variables]


class Category:
    """A named, flat group of variables, written as ``-name-`` in the source.

    Variables keep their source order. Names are not required to be unique.
    """
    __slots__ = ('name', 'variables')

    def __init__(self, name: str, variables: 'Optional[List[Variable]]'=None) -> None:
        self.name = name
        self.variables = variables if variables is not None else []

    def get(self, name: str, default=NO_VALUE) -> Value:
        """Returns the value of the first variable called ``name``.

        Raises ``KeyError`` when there is none, unless ``default`` is given.
        """
        return _lookup(self.variables, name, default)

    def __contains__(self, name):
        return any(var.name == name for var in self.variables)

    def __iter__(self) -> 'Iterator[Variable]':
        return iter(self.variables)

    def __len__(self):
        return len(self.variables)

    def __repr__(self):
        return 'Category(%r, %r)' % (self.name, self.variables)

    def __eq__(self, other):
        try:
            return self.name == other.name and self.variables == other.variables
        except AttributeError:
            return False

    def __ne__(self, other):
        return not (self == other)

    def __hash__(self):
        return hash((self.name, tuple(self.variables)))


class Config:
    """The parsed document.

    Holds the root variables (declared before the first category) and the categories,
    both in source order. Duplicate names are kept as they are: lookups return the first match.

    Parameters:
        root_variables: list of ``Variable``
        categories: list of ``Category``
    """
    __slots__ = ('root_variables', 'categories')

    def __init__(self, root_variables: 'Optional[List[Variable]]'=None, categories: 'Optional[List[Category]]'=None) -> None:
        self.root_variables = root_variables if root_variables is not None else []
        self.categories = categories if categories is not None else []

    def get(self, name: str, default=NO_VALUE) -> Value:
        "Returns the value of the first root variable called ``name``"
        return _lookup(self.root_variables, name, default)

    def get_category(self, name: str, default=NO_VALUE) -> Category:
        "Returns the first category called ``name``"
        for category in self.categories:
            if category.name == name:
                return category
        if default is NO_VALUE:
            raise KeyError(name)
        return default

    def iter_categories(self, name: str) -> 'Iterator[Category]':
        "Iterates over every category called ``name``, in source order"
        return (c for c in self.categories if c.name == name)

    def to_python(self):
        """Returns the document as plain Python containers.

        The result is ``{'root': {...}, 'categories': [(name, {...}), ...]}``.
        Since dicts can't hold duplicate keys, a repeated variable name keeps its last value.
        Use the ``Config`` itself when duplicates matter.
        """
        return {
            'root': {var.name: var.value.to_python() for var in self.root_variables},
            'categories': [(c.name, {var.name: var.value.to_python() for var in c.variables})
                           for c in self.categories],
        }

    def pretty(self, indent_str: str='  ') -> str:
        """Returns an indented string representation of the document.

        Great for debugging.
        """
        l = _pretty_variables(self.root_variables, 0, indent_str)
        for category in self.categories:
            l.append('-%s-\n' % category.name)
            l += _pretty_variables(category.variables, 1, indent_str)
        return ''.join(l)

    def __repr__(self):
        return 'Config(%r, %r)' % (self.root_variables, self.categories)

    def __eq__(self, other):
        try:
            return self.root_variables == other.root_variables and self.categories == other.categories
        except AttributeError:
            return False

    def __ne__(self, other):
        return not (self == other)

    def __hash__(self):
        return hash((tuple(self.root_variables), tuple(self.categories)))
