"""
Shared fixtures: small notes documents shaped like a book summary.
"""

import pytest

from outline_notes import parse


SAMPLE_NOTES = """\
# Effective Java

Notes on the third edition.

## Chapter 2: Creating and Destroying Objects

### Item 1: Consider static factory methods instead of constructors

- Static factories have names
- They are not required to create a new object
  - Instance control
  - Flyweight pattern

| Factory | Meaning |
|---------|---------|
| from | type conversion |
| of | aggregation |

### Item 2: Consider a builder when faced with many constructor parameters

```java
## Chapter 99: Not a chapter
NutritionFacts cocaCola = new NutritionFacts.Builder(240, 8).build();
```

## Chapter 3: Methods Common to All Objects

### Item 3: Obey the general contract when overriding equals

1. Reflexive
2. Symmetric
3. Transitive
"""


GAP_NOTES = """\
## Chapter 2: Creating and Destroying Objects

### Item 1: Consider static factory methods instead of constructors
- Static factories have names

### Item 2: Consider a builder when faced with many constructor parameters
- Telescoping constructors do not scale

## Chapter 3: Methods Common to All Objects

### Item 3: Obey the general contract when overriding equals
- Reflexive, symmetric, transitive

### Item 5: Always override toString
- Makes the class pleasant to use
"""


@pytest.fixture
def sample_text() -> str:
    return SAMPLE_NOTES


@pytest.fixture
def sample_doc():
    return parse(SAMPLE_NOTES)


@pytest.fixture
def gap_doc():
    return parse(GAP_NOTES)


@pytest.fixture
def notes_file(tmp_path):
    path = tmp_path / "effective_java.md"
    path.write_text(SAMPLE_NOTES, encoding="utf-8")
    return path


@pytest.fixture
def gap_file(tmp_path):
    path = tmp_path / "gaps.md"
    path.write_text(GAP_NOTES, encoding="utf-8")
    return path
