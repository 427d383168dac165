"""
Hand-authored Markdown fixture documents.

Each constant is a complete, self-contained document. None of them refer to
each other, and none are computed: they are plain module-level strings that
can be shared freely.
"""

from __future__ import annotations

FEATURE_SHOWCASE = r"""# Markdown Fixtures: Feature Showcase

This page demonstrates **all core features** with a single document.

- **GFM** formatting, tables, task lists
- **Autolinks** for bare URLs and email addresses
- **Images** referenced by URL
- **Code blocks** with a language tag
- **LaTeX** inline and block math
- **Long documents** for virtual scrolling

---

## ✨ Formatting

**Bold**, *italic*, ~~strikethrough~~, `inline code`, and emojis 😄.

Autolinks: https://www.python.org, https://pypi.org, and email: support@example.com

> "Build fast. Iterate faster."

---

## ✅ Task Lists

- [x] Streaming replay for incremental renderers
- [x] LaTeX math support
- [x] Code blocks with a language tag
- [ ] Custom element builders (optional)

---

## 📊 Tables

| Feature | API | Notes |
|---------|-----|-------|
| Streaming | `stream_chunks` | Character-by-character replay |
| TOC | `TOC_CONTENT` | Jump to headings |
| Virtual Scroll | `build_long_document` | Large docs |

---

## 🧩 Code Blocks

```python
from mdfixtures import FEATURE_SHOWCASE, build_long_document

document = build_long_document(sections=24)
print(f"{len(FEATURE_SHOWCASE)} + {len(document)} characters")
```

---

## 🖼️ Images

![Aurora](https://images.unsplash.com/photo-1496307042754-b4aa456c4a2d?auto=format&fit=crop&w=1200&q=80)

---

## 🧮 Math

Inline: $E = mc^2$ and $\sigma = \sqrt{\frac{1}{N}\sum_{i=1}^{N}(x_i-\mu)^2}$

Block:

$$
\int_{-\infty}^{\infty} e^{-x^2} dx = \sqrt{\pi}
$$

---

*Happy building!*
"""

STREAMING_RESPONSE = r"""# 🚀 Understanding Python Concurrency

When building Python services, **concurrency** is one of the most important concepts to master.

## 📚 What is Concurrency?

Concurrency is about structuring a program so that several tasks can make progress
without waiting on each other. There are two main kinds of work:

1. **I/O-bound work**: waiting on sockets, files, or subprocesses
2. **CPU-bound work**: crunching numbers in pure Python

The right tool depends on which kind of work dominates.

## 🔧 Popular Approaches

### asyncio

```python
import asyncio


async def fetch(index: int) -> str:
    await asyncio.sleep(0.1)
    return f"result {index}"


async def main() -> None:
    results = await asyncio.gather(*(fetch(i) for i in range(3)))
    print(results)


asyncio.run(main())
```

### Thread Pools

```python
from concurrent.futures import ThreadPoolExecutor

with ThreadPoolExecutor(max_workers=4) as pool:
    sizes = list(pool.map(len, ["alpha", "beta", "gamma"]))
```

### Process Pools

- Sidesteps the global interpreter lock
- Pays a serialization cost for every argument
- Excellent for batch number crunching

Try it from a shell to see the difference:

```bash
python -m timeit -s "import math" "math.factorial(500)"
```

---

*Hope this helps! Let me know if you have questions.*
"""

TOC_CONTENT = r"""# 📖 Chapter 1: Introduction

Welcome to this comprehensive guide. This chapter covers the fundamentals you need to get started.

## 1.1 Getting Started

Before diving in, let's set up our environment and understand the basics.

### 1.1.1 Prerequisites

Make sure you have the following installed:
- Python 3.10 or higher
- pip or uv
- Your favorite editor (VS Code, PyCharm)

### 1.1.2 Installation

Run the following command to add the package:

```bash
pip install mdfixtures
```

---

# 🧭 Chapter 2: Basic Usage

## 2.1 Rendering Static Content

```python
from mdfixtures import FEATURE_SHOWCASE

renderer.render(FEATURE_SHOWCASE)
```

## 2.2 Streaming Content

```python
from mdfixtures import STREAMING_RESPONSE, stream_chunks

for chunk in stream_chunks(STREAMING_RESPONSE, speed=2.0):
    view.append(chunk.text)
```

---

# 🎨 Chapter 3: Advanced Features

## 3.1 Custom Configuration

```toml
[tool.mdfixtures]
sections = 24
speed = 4.0
```

## 3.2 TOC Generation

### 3.2.1 Collecting Headings

Walk the parsed document and record each heading's level and text.

### 3.2.2 Building the Tree

Attach each heading to the nearest preceding heading with a lower level.

---

# ✅ Chapter 4: Conclusion

Thank you for reading! You're now ready to build amazing markdown experiences.
"""
