"""Bibliography normalization primitives.

Architecture
: `decode_bibliography` validates the payload encoding and runs the pybtex
  parser, producing `RawEntry` objects whose fields are LaTeX strings.
: `normalize_entry` turns one `RawEntry` into an immutable `NormalizedEntry`
  holding verbatim field text, a sentence-cased title and the decoded
  name lists.
: `BibliographyMap` collects normalized entries by citation key and exports
  them as plain dictionaries in lexicographic key order.

Usage Example

```pycon
>>> from citegeist.bibliography import BibliographyMap, decode_bibliography, normalize_entry
>>> payload = b\"\"\"@article{doe2023,
...   author = {Doe, Jane},
...   title = {A minimal {LaTeX} example},
... }\"\"\"
>>> bib_map = BibliographyMap(normalize_entry(entry) for entry in decode_bibliography(payload))
>>> bib_map["doe2023"].fields["title"]
'A minimal LaTeX example.'
>>> bib_map["doe2023"].parsed_names["author"][0].family
'Doe'
```
"""

from __future__ import annotations

from .collection import BibliographyMap
from .formatting import VERBATIM_FIELDS, format_field, format_raw, format_sentence, format_verbatim
from .issues import BibliographyIssue
from .names import NAME_LIST_FIELDS, PersonRecord, decode_name, decode_name_list
from .normalize import NormalizedEntry, normalize_entry
from .parsing import RawEntry, decode_bibliography, parse_bibliography


__all__ = [
    "NAME_LIST_FIELDS",
    "VERBATIM_FIELDS",
    "BibliographyIssue",
    "BibliographyMap",
    "NormalizedEntry",
    "PersonRecord",
    "RawEntry",
    "decode_bibliography",
    "decode_name",
    "decode_name_list",
    "format_field",
    "format_raw",
    "format_sentence",
    "format_verbatim",
    "normalize_entry",
    "parse_bibliography",
]
