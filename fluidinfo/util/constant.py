class Constant(object):
    """A constant value for use when defining enumerations.

    @param id: The ID of the constant.
    @param name: The name of the constant.
    """

    def __init__(self, id, name):
        self.id = id
        self.name = name

    def __str__(self):
        """Get the name of this constant."""
        return self.name

    def __repr__(self):
        """Get a representation of this constant, suitable for debugging."""
        return '<Constant id=%s name=%s>' % (self.id, self.name)
