class InvalidIrregularPair(Exception):
    pass


class InvalidConfiguration(Exception):
    pass
