_undefined = object()


def find(predicate, iterable, default=_undefined):
    for element in iterable:
        if predicate(element):
            return element

    if default is _undefined:
        raise ValueError("could not find matching element")
    else:
        return default


def find_all(predicate, iterable):
    return [
        element
        for element in iterable
        if predicate(element)
    ]


def to_dict(iterable):
    result = {}

    for key, value in iterable:
        if key in result:
            raise KeyError("key is already in dict: {!r}".format(key))

        result[key] = value

    return result
