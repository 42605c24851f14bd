# pocket48cli

A small command-line tool for two jobs: listing what is live on Pocket48 right now, and browsing recorded broadcasts.

## Installation

```
pip install .
```

## Usage

### Current live streams

```
pocket48cli live
pocket48cli live --format json
```

This prints every stream that is live now as a table. The columns are ID, type (直播, 电台 or 游戏), title, member and start time. The start time is shown in local time.

Pass `--format json` to print the raw API response instead of the table.

### Recorded broadcasts

```
pocket48cli video
pocket48cli video --next <next-id>
pocket48cli video --format json
```

This lists recorded broadcasts with the newest first. A `Next:` value is printed below the table. Pass that value to `--next` to load the following page.

The `--format` option accepts `table` or `json`. The default is `table`, and the option is case-insensitive. Any other value falls back to `table`.

The options may also be written with a single dash, for example `-format json` or `-next <next-id>`.

An unknown command prints an error and exits with status 1. So does running the tool with no command. If the API reports a failure, the raw JSON reply is printed.

## Configuration

`pocket48cli.config.load_yaml_config(name)` reads a YAML file from the parent of the current working directory. It reads `config.yaml` when `name` is empty or not given. It returns a `Config` with these fields:

- `ffmpeg`
- `pocket48.live.auto_record`
- `pocket48.live.record_name`

An example file:

```yaml
ffmpeg: ffmpeg
pocket48:
  live:
    autoRecord: false
    recordName: []
```

`pocket48cli.config.ConfigError` is raised in any of these cases:

- the file is missing
- the file cannot be read
- the file is not valid YAML
- a section has the wrong shape

## Library use

```python
from pocket48cli.live_list import request_live_list

response, raw_json = request_live_list(True, "0", "", "")
if response.success:
    for item in response.content.live_list:
        print(item.live_id, item.title, item.user_info.nickname)
```

`request_live_list(in_live, next_page, group_id, user_id)` returns two things: the parsed `LiveListResponse` and the raw JSON text.

An unsuccessful API reply does not raise. Check `response.success` instead. `LiveListError` is raised only in these cases:

- the reply is not a JSON object
- a lookup by user id with `next_page == "0"` cannot find a starting point

Network failures raise the usual `requests` exceptions.

`pocket48cli.live.render_table(response, in_live)` renders a response as a text table.

## What it does not do

The package only lists streams. It does not record or download streams, and it does not play them. The `ffmpeg`, `autoRecord` and `recordName` settings are read into `Config`, but nothing in the package acts on them.

## Development

```
pip install -e ".[test]"
pytest
```