# %% [markdown]
# # fuzzyrank: Quickstart
#
# **Filter as you type** - ranking and highlighting for command palettes
#
# ---
#
# ## The Problem
#
# A user opens the command palette and types three letters. Which of your
# two hundred commands should come first, and which letters should light up?
#
# ```
# "ban"   ->  banana            (starts with it)
# "wor"   ->  Hello World       (word inside the text)
# "hwl"   ->  Hello World       (fuzzy: H-ello W-or-l-d)
# ```
#
# Scores are error levels: **lower is better**.

# %%
import polars as pl

import fuzzyrank as fz

# %% [markdown]
# ## Part 1: Searching a list

# %%
commands = [
    "Open File",
    "Open Recent File",
    "Save File",
    "Close Window",
    "New Terminal Window",
    "Toggle Word Wrap",
    "Git: Pull (Rebase)",
]

search = fz.create_fuzzy_search(commands)

for query in ["open", "file open", "win", "gpr"]:
    print(f"Query: {query!r}")
    for r in search(query):
        print(f"  [{r.score:.1f}] {fz.highlight(r.item, r.matches[0], mark=lambda s: f'[{s}]')}")

# %% [markdown]
# ## Part 2: Strategies
#
# | Strategy | Fuzzy fallback |
# |----------|----------------|
# | off | none, only exact / prefix / contains |
# | smart | chunks at word starts or runs of 3+ letters (default) |
# | aggressive | any letters in order |

# %%
for strategy in fz.Strategy:
    results = fz.create_fuzzy_search(["Hello World"], strategy=strategy)("hwl")
    print(f"{strategy.value:>10}: {[(r.score, r.matches) for r in results]}")

# %% [markdown]
# ## Part 3: Records with several fields

# %%
users = [
    {"name": "John Smith", "email": "jsmith@example.com"},
    {"name": "María José Núñez", "email": "mjnunez@example.com"},
]
search = fz.create_fuzzy_search(users, get_text=lambda u: [u["name"], u["email"]])
for r in search("nunez"):
    print(r.score, r.item["name"], r.matches)

# %% [markdown]
# ## Part 4: Polars

# %%
df = pl.DataFrame({"name": commands})
print(df.with_columns(score=pl.col("name").fuzzy.score("file")))
print(fz.search_dataframe(df, "term", columns="name"))
