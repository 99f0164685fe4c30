from fluidinfo.common import defaults, error


def _getObjects(result):
    """Get the C{objectId -> tags} mapping from a C{/values} result."""
    try:
        objects = result[defaults.resultsKey][defaults.idKey]
    except (KeyError, TypeError, IndexError):
        return {}
    return objects if isinstance(objects, dict) else {}


def flattenTagValue(baseURL, objectID, path, entry):
    """Flatten a single tag value from a C{/values} result.

    @param baseURL: The base URL of the Fluidinfo instance.
    @param objectID: The ID of the object the value is attached to.
    @param path: The path of the tag.
    @param entry: The C{dict} describing the value in the result.
    @return: The value itself, or a C{dict} with C{value-type}, C{size} and
        C{url} keys if the value is opaque.
    """
    if isinstance(entry, dict) and defaults.valueKey not in entry:
        url = '%s%s/%s/%s' % (baseURL, defaults.httpObjectCategoryName,
                              objectID, path)
        return {defaults.valueTypeKey: entry.get(defaults.valueTypeKey),
                defaults.sizeKey: entry.get(defaults.sizeKey),
                defaults.urlKey: url}
    if isinstance(entry, dict):
        return entry[defaults.valueKey]
    return entry


def flattenObject(baseURL, objectID, tags):
    """Flatten the tag values of a single object.

    @return: A C{dict} mapping tag paths to values, with an extra C{id}
        key.
    """
    result = {defaults.idKey: objectID}
    if isinstance(tags, dict):
        for path, entry in tags.items():
            result[path] = flattenTagValue(baseURL, objectID, path, entry)
    return result


def flattenMany(result, baseURL):
    """Flatten every object in a C{/values} result.

    @param result: The decoded C{/values} response payload.
    @param baseURL: The base URL of the Fluidinfo instance, used to build
        URLs for opaque values.
    @return: A C{list} of flattened objects, in the order the objects
        appear in C{result}.
    """
    return [flattenObject(baseURL, objectID, tags)
            for objectID, tags in _getObjects(result).items()]


def flattenSingle(result, baseURL):
    """Flatten a C{/values} result that matches at most one object.

    @param result: The decoded C{/values} response payload.
    @param baseURL: The base URL of the Fluidinfo instance.
    @raise UnexpectedResult: Raised if more than one object is present.
    @return: The flattened object, or C{{'id': None}} if no object matched.
    """
    objects = _getObjects(result)
    if not objects:
        return {defaults.idKey: None}
    if len(objects) > 1:
        raise error.UnexpectedResult(
            'Expected a single object, got %d.' % len(objects))
    [(objectID, tags)] = objects.items()
    return flattenObject(baseURL, objectID, tags)
