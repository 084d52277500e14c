# saffron

Building blocks for a command-line HTTP client aimed at testing and debugging
APIs: request and response models, collections of saved requests, environments
of `{{name}}` variables, a request history, on-disk storage for all three,
coloured terminal output, a lenient JSON reader and an importer for Insomnia v4
exports.

## Installation

```
pip install .
```

The only runtime dependency is `termcolor`, used for coloured output.

## What is here

| Module | Contents |
| --- | --- |
| `saffron.request` | `HttpMethod`, `parse_method`, `HttpHeader`, `HttpRequest` and the body types `TextBody`, `JsonBody`, `FormBody`, `MultipartBody` (of `FormDataPart` / `FormDataFile`), `BinaryBody` |
| `saffron.response` | `HttpResponse` with status-class checks, case-insensitive header lookup and content-type tests |
| `saffron.body` | `ContentType`, `classify_mime`, `encode_form_urlencoded` |
| `saffron.collection` | `Collection`, `Folder`, `SavedRequest`, `SerializableRequest` |
| `saffron.environment` | `Environment`, `EnvironmentSet` |
| `saffron.history` | `HistoryEntry`, `HistoryRequest`, `HistoryResponse` |
| `saffron.storage` | `Storage`, `sanitize_filename` |
| `saffron.jsonparse` | `parse_json`, `ParseError` |
| `saffron.tokenizer` | the scanner behind `parse_json`: `Tokenizer`, `tokenize`, `TokenStream`, `Token`, `TokenKind`, `Span` |
| `saffron.importers` | `auto_import`, the Insomnia functions and the `CollectionImportError` family |
| `saffron.output` | `print_response`, `format_status`, `format_json`, `print_error`, `print_success`, `print_info` |
| `saffron.collection_command` | the collection actions: new, list, show, add, delete, export, import |
| `saffron.env_command` | the environment actions: list, set, show, delete, use |
| `saffron.textfile` | `read_file_without_bom` |

## Building requests

`HttpRequest` is a dataclass; its `with_*` methods return modified copies, while
`add_header` changes the request in place.

```python
from saffron.request import HttpRequest, parse_method

request = (
    HttpRequest.post("https://api.example.com/users")
    .with_header("Authorization", "Bearer token")
    .with_json_body('{"name": "Alice"}')
    .with_timeout(45)
    .with_follow_redirects(False)
)
request.get_header("authorization")   # "Bearer token"
parse_method("patch")                 # HttpMethod.PATCH; unknown names raise ValueError
```

A new request has a 30 second timeout and follows redirects.

## Responses

```python
from saffron.response import HttpResponse

response = HttpResponse(200, "OK", {"Content-Type": "application/json"}, b'{"ok": true}')
response.is_success()      # True
response.is_json()         # True
response.body_as_str()     # '{"ok": true}', or None if the body is not UTF-8
response.content_length()  # None: no Content-Length header
```

`saffron.output.print_response(response, verbose)` prints the coloured status,
the headers when `verbose` is true, and the body, pretty-printing it when the
response is JSON.

## Environments

```python
from saffron.environment import Environment, EnvironmentSet

dev = Environment("dev")
dev.set("base_url", "https://dev.example.com")
dev.resolve_template("{{base_url}}/users/{{id}}")
# "https://dev.example.com/users/{{id}}" — unknown placeholders are left alone

environments = EnvironmentSet()
environments.add(dev)
environments.set_active("dev")
environments.get_active().name  # "dev"
```

## Collections

```python
from saffron.collection import Collection, Folder, SavedRequest
from saffron.request import HttpRequest

api = Collection("api").with_description("My API")
users = Folder("users")
users.add_request(
    SavedRequest.from_http_request("list", "List users", HttpRequest.get("https://api.example.com/users"))
)
api.add_folder(users)
api.find_request("list").to_http_request()
```

Only text and JSON bodies are kept when a request is saved; when it is rebuilt
the body comes back as a text body, and an unknown method falls back to GET.

## Storage

`Storage` keeps everything as JSON files under a base directory, `~/.saffron`
unless another path is given:

- collections in `collections/<name>.json` (characters not allowed in file names become `_`),
- environments in `environments/environments.json`,
- history in `history.json`, newest first, at most 100 entries.

```python
from saffron.storage import Storage
from saffron.history import HistoryEntry, HistoryRequest, HistoryResponse

storage = Storage("/tmp/saffron-data")
storage.save_collection(api)
storage.list_collections()            # ["api"], sorted
storage.load_collection("api")        # OSError if absent, ValueError if malformed

entry = HistoryEntry.create(
    HistoryRequest("GET", "https://api.example.com/users"),
    HistoryResponse.from_response(response),
    duration_ms=120,
)
storage.save_history_entry(entry)
storage.load_history()[0].format_timestamp()   # "YYYY-MM-DD HH:MM:SS", UTC
storage.clear_history()
```

`HistoryResponse.from_response` keeps a preview of the body: text longer than
500 bytes is cut and followed by `...`, and a body that is not UTF-8 is shown as
`<binary data, N bytes>`.

## Collection and environment actions

`saffron.collection_command` and `saffron.env_command` carry out the
user-facing actions on a `Storage`, printing coloured messages and returning
what they made or found:

```python
from saffron import collection_command, env_command

collection_command.collection_new(storage, "api", "My API")
collection_command.collection_add(
    storage, "api", "list-users", "https://api.example.com/users",
    "GET", [("Accept", "application/json")], None, None,
)
collection_command.collection_show(storage, "api")
collection_command.collection_export(storage, "api", "api.json")
collection_command.collection_import(storage, "insomnia-export.json")
collection_command.collection_delete(storage, "api")

env_command.env_set(storage, "dev", [("base_url", "https://dev.example.com")])
env_command.env_use(storage, "dev")
env_command.env_list(storage)     # the active environment is marked with *
env_command.env_show(storage, "dev")
env_command.env_delete(storage, "dev")
```

## Importing Insomnia exports

`saffron.importers.auto_import(text)` recognises Insomnia v4 exports and
returns one `ImportedCollection` per workspace, holding the requests whose
parent is that workspace. Other versions raise `UnsupportedVersionError`,
unrecognised content raises `InvalidFormatError`, and JSON that cannot be read
raises `ImportParseError`; all derive from `CollectionImportError`.
`collection_command.convert_imported_to_collection` turns the result into a
`Collection`.

## JSON reader

```python
from saffron.jsonparse import parse_json

parse_json("{'key': [1, 2.5, true, null]}")
# {"key": [1.0, 2.5, True, None]}
```

Besides standard JSON it accepts single-quoted strings. Numbers come back as
floats, text after the first complete value is ignored, and errors raise
`ParseError` (a `ValueError`).

## Other helpers

- `encode_form_urlencoded({"user name": "alice"})` gives `"user+name=alice"`.
- `classify_mime("application/json; charset=utf-8")` gives `ContentType.JSON`;
  an unknown type is returned unchanged as a string.
- `read_file_without_bom(path)` reads a file as UTF-8, dropping a leading byte
  order mark and replacing invalid bytes.

## What this package does not do

There is no HTTP transport: nothing here sends a request over the network or
fills an `HttpResponse` from a server. There is also no command-line program to
install, and so no actions to send a request, or to list, show or rerun
history entries; those records can only be written and read through `Storage`
and `saffron.history` from Python code.

## Running the tests

```
pip install ".[test]"
pytest
```