# keyid

`keyid` helps a DJ pick the next track. It works with tracks that carry a
BPM, a musical key, an energy level read from the comment and personal tags,
and either suggests tracks that mix well after the one playing now, or chains
a whole playlist together so that each transition stays in a compatible key
and a close tempo.

The package has no dependencies outside the standard library.

## Keys (`keyid.camelot`)

Keys are `CamelotScale` values: an `index` on the wheel and a `ScaleKind`
(`ScaleKind.MINOR` is `A`, `ScaleKind.MAJOR` is `B`). `new_key` and
`parse_camelot_key` read Camelot notation such as `8A` as well as
conventional names listed in `PITCH_TO_CAMELOT` (`Am`, `C#`, `Ebm`, ...).
A name that is neither is logged as a warning and read as `0B`.
`CAMELOT_KEYS` holds the 24 keys `1A` to `12B`.

`CamelotScale` offers the wheel moves `change_index`, `horizontal`,
`vertical`, `swap_kind`, `diagonal`, `major_to_minor` and `flat_to_minor`.
`a.is_compatible(b)` is true when `a` is `b` itself or is reached from `b` by
one of: a vertical or diagonal move, `major_to_minor`, `flat_to_minor`, or a
horizontal move of +1, -1, +2, -3, +9 or -5 steps.

```python
from keyid.camelot import new_key

current = new_key("8A")
print(new_key("9A").is_compatible(current))  # True: one step around the wheel
print(new_key("Am").is_compatible(current))  # True: Am is 8A
print(current.diagonal(), current.vertical())  # 7B 8B
```

## Tracks (`keyid.track`)

`Track` holds `id`, `bpm`, `scale`, `artist`, `title`, `energy`, `path`,
`date_added` and `tags`; two tracks are equal when their ids are equal.
`Track.from_content` builds one from a `ContentRecord` (BPM stored in
hundredths), a key name (`0A` when missing), an artist name (`<none>` when
missing) and tag names.

* `bpm_matches_target(bpm)` is true within 1.8 % of the target tempo.
* `is_compatible(other)` needs a tempo match and `other`'s key compatible
  with this one.
* `as_bpm(bpm)` returns a copy without a path; when the target is between
  5 % and 6.5 % away, the copy takes the target tempo and its key moves seven
  steps around the wheel.

`str(track)` gives `BPM<tab>key<tab>energy<tab>artist - title`.

## Helpers (`keyid.util`, `keyid.collection`)

`parse_energy("Energy 7 - peak time")` returns `7`, and `0` when no
`Energy <n>` appears. `contains_any_of(items, other)` checks only the first
entry of `other`.

`Collection` is an ordered sequence of tracks compared by equality. `add`
skips items already present (the constructor keeps what it is given). It
supports `len()`, `in`, iteration, `filter`, `map`, `reduce`, `find`,
`index_of`, `sort_with` (a "less than" comparator, returning a de-duplicated
copy), `move_to` and in-place `shuffle`.

## Suggesting and generating (`keyid.client`)

`RekordboxClient(source, args=None, history=None)` reads from a library
source object that provides `all_content`, `playlists_by_name`,
`all_playlists`, `playlist_songs`, `content_by_id`, `recent_history`,
`key_name`, `artist_name`, `tag_names` and `close`, returning
`ContentRecord` and `PlaylistRecord` values.

* `load_playlist(name)` loads the whole library when `args.playlist` is
  empty, otherwise the named playlist in track-number order (raising
  `PlaylistNotFoundError` if there is none), keeping only tracks whose
  `date_added` sorts after `args.from_date`.
* `get_playlists()` returns the tree of `PlaylistNode`s
  (see also `build_playlist_tree`).
* `get_now_playing` returns the track matching `args.start_with`, or the
  most recently played track, which is then recorded in the `History`.
* `get_compatible_tracks` returns the unplayed tracks compatible with a
  given one, narrowed by `args.tags` and `args.exclude_tags` when that
  leaves any.
* `suggest` returns the compatible tracks for the track now playing.
* `generate` starts from the first track whose title contains
  `args.start_with` and keeps appending compatible tracks; when none is left
  it falls back to a tempo-matched track and, in the later retries, to any
  remaining track. With `args.random` the order is shuffled.
* `run()` loads `args.playlist` and runs `args.mode`.

A missing title raises `TrackNotFoundError` from `get_track_by_title`;
`suggest` and `generate` log it and return an empty collection.

## Options and output (`keyid.args`, `keyid.printer`, `keyid.options`)

`parse_args(argv)` reads `-mode`, `-from`, `-startWith`, `-tags`,
`-excludeTags`, `-playlist`, `-random`, `-m3u` and `-debug` (each also with
`--`) into an `Args` dataclass; `Mode` lists `suggest` and `generate`.

`provide_printer(args, stream=None)` returns an `M3uPrinter` in generate
mode with `m3u` set, otherwise a `CliPrinter` that writes `str(track)` per
line. Both write to standard output unless given a stream.

`resolve_options_path(platform=None, home=None)` returns where the library's
`options.json` lives on macOS or Windows and raises
`UnsupportedPlatformError` elsewhere.

## Notifications and wiring (`keyid.mediator`, `keyid.events`, `keyid.app`)

`NotificationChannel`, `NotificationPublisher` and `Mediator` pass
notifications to handlers whose `notification_type` matches
`notification_type(notification)`, each in its own thread. `AppStarted` and
`AppStartedHandler` are the one event and handler. `Application(args, source)`
builds a client and mediator; `start()` publishes `AppStarted`, `stop()`
stops the mediator and closes the client. `configure_logging(args)` sends
the package's log to stderr, at debug level with `args.debug`.

## Interactive sessions (`keyid.session`)

`Session(client)` holds the state behind an interactive front end: the
playlist tree (`tree_children`, `is_branch`), selection and loading,
now-playing text, suggestions, the generated playlist, `button_states()`
and `export_m3u(stream)`. Failed actions raise `SessionError` and set the
status text. `track_cell(row, col, tracks)` gives the text of a table cell.

## What the package does not do

* It does not read a library database itself: a source object as described
  above has to be supplied.
* It has no command to run; `parse_args` and `Application` are there to be
  called from your own code.
* It draws no window; `Session` holds the state a graphical front end would
  display.

## Running the tests

Install the `test` extra and run `pytest`.