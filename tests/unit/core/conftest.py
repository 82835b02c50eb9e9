"""Shared fixtures for core unit tests"""

import pytest

from statiko.core.markdown import parse


SAMPLE_MD = """\
# Heading 1

A paragraph with **bold** text.

## Heading 2

- item one
- item two

```python
print("hello")
```

---

Footer paragraph.
"""


@pytest.fixture(name="sample_tree")
def sample_tree_fixture():
    return parse(SAMPLE_MD)
