from . import GraphError, iterables


class ScalarType(object):
    def __init__(self, name):
        self.name = name

    def __repr__(self):
        return "ScalarType(name={!r})".format(self.name)

    def __str__(self):
        return self.name


Int = ScalarType("Int")

String = ScalarType("String")


class ObjectType(object):
    def __init__(self, name, fields, description=None):
        self.name = name
        self.description = description
        if not callable(fields):
            fields = _lambdaize(fields)
        def owned_fields():
            return tuple(
                field.with_owner_type(self)
                for field in fields()
            )
        self.fields = Fields(name, owned_fields)

    def __repr__(self):
        return "ObjectType(name={!r})".format(self.name)

    def __str__(self):
        return self.name


class Fields(object):
    def __init__(self, type_name, fields):
        self._type_name = type_name
        self._fields = _memoize(fields)

    def __iter__(self):
        return iter(self._fields())

    def __contains__(self, field):
        return field in self._fields()

    def __getattr__(self, field_name):
        field = self._find_field(field_name)

        if field is None and field_name.endswith("_"):
            field = self._find_field(field_name[:-1])

        if field is None:
            raise GraphError("{} has no field {}".format(self._type_name, field_name))
        else:
            return field

    def _find_field(self, field_name):
        return iterables.find(lambda field: field.name == field_name, self._fields(), default=None)


class ListType(object):
    def __init__(self, element_type):
        self.element_type = element_type

    def __eq__(self, other):
        if isinstance(other, ListType):
            return self.element_type == other.element_type
        else:
            return NotImplemented

    def __ne__(self, other):
        return not (self == other)

    def __hash__(self):
        return hash(self.element_type)

    def __repr__(self):
        return "ListType(element_type={!r})".format(self.element_type)

    def __str__(self):
        return "List({})".format(self.element_type)


class NullableType(object):
    def __init__(self, element_type):
        self.element_type = element_type

    def __eq__(self, other):
        if isinstance(other, NullableType):
            return self.element_type == other.element_type
        else:
            return NotImplemented

    def __ne__(self, other):
        return not (self == other)

    def __hash__(self):
        return hash(self.element_type)

    def __repr__(self):
        return "NullableType(element_type={!r})".format(self.element_type)

    def __str__(self):
        return "Nullable({})".format(self.element_type)


def field(name, type, params=None, description=None):
    if params is None:
        params = ()
    return Field(owner_type=None, name=name, type=type, params=params, description=description)


class Field(object):
    def __init__(self, owner_type, name, type, params, description):
        self.owner_type = owner_type
        self.name = name
        self.type = type
        self.params = Params(name, params)
        self.description = description

    def with_owner_type(self, owner_type):
        return Field(
            owner_type=owner_type,
            name=self.name,
            type=self.type,
            params=tuple(self.params),
            description=self.description,
        )

    def __repr__(self):
        return "Field(name={!r}, type={!r})".format(self.name, self.type)

    def __str__(self):
        if self.owner_type is None:
            return self.name
        else:
            return "{}.{}".format(self.owner_type.name, self.name)


class Params(object):
    def __init__(self, field_name, params):
        self._field_name = field_name
        self._params = tuple(params)

    def __iter__(self):
        return iter(self._params)

    def __getattr__(self, param_name):
        param = iterables.find(lambda param: param.name == param_name, self._params, default=None)

        if param is None:
            raise GraphError("{} has no param {}".format(self._field_name, param_name))
        else:
            return param


def param(name, type, description=None):
    return Parameter(name=name, type=type, description=description)


class Parameter(object):
    def __init__(self, name, type, description):
        self.name = name
        self.type = type
        self.description = description

    def __repr__(self):
        return "Parameter(name={!r}, type={!r})".format(self.name, self.type)


def _memoize(func):
    result = []

    def get():
        if not result:
            result.append(func())

        return result[0]

    return get


def _lambdaize(value):
    return lambda: value
