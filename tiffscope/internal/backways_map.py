# Copyright (c) 2017 The Regents of the University of Michigan.
# All Rights Reserved. Licensed according to the terms of the Revised
# BSD License. See LICENSE.txt for details.

def make_backways_map (enum_class):
    """Make a backways value mapping.

    This takes in what is basically an enum class and constructs a
    dictionary keyed on the values. Its values will be the associated
    name strings.

    Args:
        enum_class (class): The class to make a reverse mapping of.

    Returns:
        dict:               A mapping with keys matching the values of
                            the class. Its values will match the class
                            variable names.

    Examples:
        >>> class SomeEnum:
        ...     ThingOne    = 1
        ...     ThingTwo    = 2
        ...
        >>> make_backways_map(SomeEnum)
        {1: 'ThingOne', 2: 'ThingTwo'}

        Collisions in enum values are not allowed.

        >>> class BadEnum:
        ...     ThingOne        = 1
        ...     AnotherThingOne = 1
        ...
        >>> make_backways_map(BadEnum)
        Traceback (most recent call last):
          File "<stdin>", line 1, in <module>
        AssertionError: Can't have more than one 1 (BadEnum.ThingOne and
                BadEnum.AnotherThingOne)

    """

    result  = { }

    error   = "Can't have more than one {{:d}} ({name}.{{}} and" \
              " {name}.{{}})".format(name = enum_class.__name__).format

    for key, value in vars(enum_class).items():
        if key.startswith("_"):
            # All the regular python stuff starts with underscores.
            continue

        assert value not in result, error(value, result[value], key)
        result[value] = key

    return result
