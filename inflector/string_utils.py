def from_underscores(word: str) -> str:
    """
    Convert an underscore_case string to CamelCase.

    Only the first character of each segment is changed, so ``'http_URL'``
    becomes ``'HttpURL'``. Empty segments are dropped.

    :param word: The underscore_case string to convert.
    :return: The CamelCase string.
    """
    return ''.join(segment[:1].upper() + segment[1:] for segment in word.split('_'))
