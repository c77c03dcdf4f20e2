from typing import Tuple

# Nouns with irregular singular and/or plural forms, as (singular, plural)
# pairs. Hosts add their own pairs through InflectorConfig.
IRREGULAR_NOUNS: Tuple[Tuple[str, str], ...] = (
    ('alumnus',     'alumni'),
    ('cactus',      'cacti'),
    ('focus',       'foci'),
    ('fungus',      'fungi'),
    ('nucleus',     'nuclei'),
    ('radius',      'radii'),
    ('stimulus',    'stimuli'),
    ('axis',        'axes'),
    ('analysis',    'analyses'),
    ('basis',       'bases'),
    ('crisis',      'crises'),
    ('diagnosis',   'diagnoses'),
    ('ellipsis',    'ellipses'),
    ('hypothesis',  'hypotheses'),
    ('oasis',       'oases'),
    ('paralysis',   'paralyses'),
    ('parenthesis', 'parentheses'),
    ('synthesis',   'syntheses'),
    ('synopsis',    'synopses'),
    ('thesis',      'theses'),
    ('appendix',    'appendices'),
    ('index',       'indeces'),
    ('matrix',      'matrices'),
    ('beau',        'beaux'),
    ('bureau',      'bureaus'),
    ('tableau',     'tableaux'),
    ('child',       'children'),
    ('man',         'men'),
    ('ox',          'oxen'),
    ('woman',       'women'),
    ('bacterium',   'bacteria'),
    ('corpus',      'corpora'),
    ('criterion',   'criteria'),
    ('curriculum',  'curricula'),
    ('datum',       'data'),
    ('genus',       'genera'),
    ('medium',      'media'),
    ('memorandum',  'memoranda'),
    ('phenomenon',  'phenomena'),
    ('stratum',     'strata'),
    ('deer',        'deer'),
    ('fish',        'fish'),
    ('means',       'means'),
    ('offspring',   'offspring'),
    ('series',      'series'),
    ('sheep',       'sheep'),
    ('species',     'species'),
    ('foot',        'feet'),
    ('goose',       'geese'),
    ('tooth',       'teeth'),
    ('antenna',     'antennae'),
    ('formula',     'formulae'),
    ('nebula',      'nebulae'),
    ('vertebra',    'vertebrae'),
    ('vita',        'vitae'),
    ('louse',       'lice'),
    ('mouse',       'mice'),
    ('quiz',        'quizzes'),
    ('search',      'searches'),
)
