# searchserver

searchserver is a small full-text search engine that keeps its index in memory.
It ranks documents by TF-IDF and ignores stop words. Minus words exclude
documents from the results, and ties in relevance are broken by average rating.
The package also has a paginator, a request queue that counts how many recent
requests found nothing, and two helpers for reading input from a stream.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install ".[test]"
```

## Searching

```python
from searchserver.document import DocumentStatus
from searchserver.search_server import SearchServer

server = SearchServer("and in on")
server.add_document(1, "fluffy cat fluffy tail", DocumentStatus.ACTUAL, [7, 2, 7])
server.add_document(2, "fluffy dog and fancy collar", DocumentStatus.ACTUAL, [1, 2, 3])
server.add_document(3, "big cat fancy collar", DocumentStatus.ACTUAL, [1, 2, 8])

for doc in server.find_top_documents("fluffy cat -collar"):
    print(doc)   # { document_id = 1, relevance = ..., rating = 5 }
```

`SearchServer` takes its stop words in one of two forms:

- a string, which is split on spaces
- any iterable of strings

Empty stop words are dropped.

Documents and queries are split on spaces. In a query, a word that starts with
`-` is a minus word: any document that contains it is left out of the results.
Stop words are ignored in both documents and queries.

A document's rating is the average of its ratings, truncated toward zero. A
document with no ratings has a rating of 0.

### Results

`find_top_documents` returns at most five `Document` objects. Each has the
fields `id`, `relevance` and `rating`. Results are ordered by relevance, highest
first. If two documents' relevances are within `1e-6` of each other, the one
with the higher rating comes first.

### Filtering

The optional second argument of `find_top_documents` is a criterion. It can be
either of these:

- a `DocumentStatus`: `ACTUAL` (the default), `IRRELEVANT`, `BANNED` or `REMOVED`
- a callable `(document_id, status, rating) -> bool`

```python
server.find_top_documents("cat", DocumentStatus.BANNED)
server.find_top_documents("cat", lambda doc_id, status, rating: doc_id % 2 == 0)
```

### Other methods

- `match_document(query, document_id)` returns a pair: the query's plus words
  found in the document, in sorted order, and the document's status. The list
  of words is empty if any minus word occurs in the document. An unknown
  `document_id` raises `KeyError`.
- `len(server)` is the number of indexed documents.
- `server.document_id_at(i)` gives the id of the i-th document added, counting
  from zero. An index out of range raises `IndexError`.

### Errors

The following raise `ValueError`:

- a negative or duplicate document id
- a stop word, document word or query word that contains a control character
  (a character below the space)
- a query word that is a bare `-`, or one that starts with `--`

## Pagination

```python
from searchserver.paginator import paginate

for page in paginate(range(10), 3):
    print(len(page), list(page))
```

`paginate(items, page_size)` returns a `Paginator`. The paginator is an iterable
of `Page` objects, in input order, and the last page may be shorter than the
others. `str(page)` joins the string forms of the page's items. A `page_size`
below 1 raises `ValueError`.

## Request statistics

```python
from searchserver.request_queue import RequestQueue

queue = RequestQueue(server)
queue.add_find_request("empty query")
print(queue.no_result_requests())
```

`add_find_request(query, criterion)` takes the same criterion as
`find_top_documents`, passes the query to the server and returns the results.
Each request advances the queue's clock by one tick. Requests that are 1440
ticks old or older drop out of the window. `no_result_requests()` counts the
requests still in the window that returned nothing.

## Reading input

`searchserver.read_input` has two functions. Each reads from a text stream, or
from standard input when no stream is given.

- `read_line(stream)` returns one line without its newline. It returns an
  empty string at the end of input.
- `read_line_with_number(stream)` skips blank lines and reads the integer at
  the start of the next line, discarding the rest of that line. If the line
  does not start with an integer, it raises `ValueError`. If the input ends
  first, it raises `EOFError`.

## Command line

```
searchserver
```

This runs a fixed demonstration and takes no options other than `--help`. It
indexes five sample documents, sends 1442 requests through a `RequestQueue` and
prints how many of the requests still in the window found nothing.

## Limitations

- The index exists only in memory and is never saved to disk.
- Documents can be added but not removed.
- There is no network server.
- The command line cannot index or search your own documents; use the library
  for that.