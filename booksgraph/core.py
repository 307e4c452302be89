from . import iterables


def define_graph(resolvers):
    return GraphDefinition(resolvers)


class GraphDefinition(object):
    def __init__(self, resolvers):
        # Fields are looked up here rather than when resolvers are declared,
        # so that object types may refer to each other through field thunks.
        self._resolvers = iterables.to_dict(
            (getattr(resolver.type.fields, resolver.field_name), resolver)
            for resolver in _flatten(resolvers)
        )

    def create_graph(self, dependencies):
        return Graph(self._resolvers, dependencies)


class Graph(object):
    def __init__(self, resolvers, dependencies):
        self._resolvers = resolvers
        self._injector = Injector(dependencies)

    def has_resolver(self, field):
        return field in self._resolvers

    def resolve(self, field, parent, args=None):
        if args is None:
            args = Args({})

        resolver = self._resolvers.get(field)
        if resolver is not None:
            return self._injector.call_with_dependencies(resolver, self, parent, args)
        elif parent is None:
            raise GraphError("could not find resolver for field: {}".format(field))
        else:
            return _resolve_attribute(field, parent)


def _resolve_attribute(field, parent):
    try:
        return getattr(parent, field.name)
    except AttributeError:
        raise GraphError("{!r} has no value for field {}".format(parent, field))


class Injector(object):
    def __init__(self, dependencies):
        self._dependencies = dependencies.copy()
        self._dependencies[Injector] = self

    def get(self, key):
        return self._dependencies[key]

    def call_with_dependencies(self, func, *args, **kwargs):
        dependencies = getattr(func, "dependencies", dict())
        dependency_kwargs = iterables.to_dict(
            (arg_name, self.get(dependency_key))
            for arg_name, dependency_key in dependencies.items()
        )
        return func(*args, **kwargs, **dependency_kwargs)


class Args(object):
    def __init__(self, values):
        self._values = dict(values)
        for key in self._values:
            setattr(self, key, self._values[key])

    def __eq__(self, other):
        if isinstance(other, Args):
            return self._values == other._values
        else:
            return NotImplemented

    def __ne__(self, other):
        return not (self == other)

    def __repr__(self):
        return "Args({!r})".format(self._values)


def _flatten(value):
    if isinstance(value, (list, tuple)):
        return [
            subelement
            for element in value
            for subelement in _flatten(element)
        ]
    else:
        return [value]


def resolver(type, field_name):
    def register_resolver(func):
        func.type = type
        func.field_name = field_name
        return func

    return register_resolver


def dependencies(**kwargs):
    def register_dependency(func):
        func.dependencies = kwargs
        return func

    return register_dependency


class GraphError(Exception):
    pass
