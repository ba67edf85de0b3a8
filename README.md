# termfolio

A personal résumé that lives in the terminal. It has three front ends:

- an **HTTP server** that returns a colourful ANSI page, made to be read with `curl`;
- an **interactive TUI** with an About page, a Contacts menu that opens links in a browser, and a small game of Tetris;
- an **SSH server** that runs the same TUI for every terminal that connects.

The name, links and résumé text shown on every screen are set in `termfolio/content.py`; edit them there.

## Installation

```
pip install .
```

## Usage

Run the interactive TUI in your current terminal:

```
termfolio
```

In the menu, move with `↑`/`↓` or `j`/`k`, confirm with `Enter`, and quit with `q` or `Ctrl+C`. `b` or `esc` goes back from the About, Contacts and Tetris screens. In Tetris, `←`/`→` move the piece, `a`/`s` rotate it clockwise (with wall kicks), `↓`/`j` soft-drop it, and `r` or `Enter` starts a new game once the current one is over. Cleared lines score 100, 300, 500 or 800 for one, two, three or four lines.

Choosing an entry in Contacts starts the platform's URL opener (`xdg-open`, `open`, or `rundll32` on Windows) on the machine where termfolio runs.

Serve the résumé over HTTP and the TUI over SSH:

```
termfolio -serve
# or
termfolio serve
```

The HTTP server answers `GET /` and `GET /terminal` with the ANSI page as `text/plain; charset=utf-8`. `/terminal/` is redirected (301) to `/terminal`, other paths get `404`, and any other method gets `405`. Read the page with:

```
curl -s http://127.0.0.1:8080/
```

### Options

| Option        | Meaning                                                                                   |
|---------------|-------------------------------------------------------------------------------------------|
| `-serve`      | Start the HTTP server and the SSH server.                                                 |
| `-addr ADDR`  | HTTP listen address. Without it, `0.0.0.0:$PORT` if `PORT` is set, otherwise `:8080`.      |
| `-ssh ADDR`   | SSH listen address. Without it, `:$SSH_PORT` if `SSH_PORT` is set, otherwise `:2222`.       |

Long forms `--serve`, `--addr` and `--ssh` are accepted too. Any other argument prints a usage message and exits with status 2.

When the HTTP address is left at the default `:8080` and that port is busy, the ports from `:8081` to `:8099` are tried in turn.

Passing `-ssh ADDR` without `-serve` starts only the SSH server. The servers run until `SIGINT` or `SIGTERM`. The SSH host key is kept at `.ssh/term_ed25519` in the current directory and is created (Ed25519) on first start if it does not exist. Connect with:

```
ssh -p 2222 localhost
```

A client that does not request a terminal is told `no terminal detected` and disconnected.

Hyperlinks on the curl page use OSC 8, so they can only be clicked in terminals that support it.

## Using it as a library

- `termfolio.ansi.curl_page()` returns the full ANSI page as a string.
- `termfolio.tui.Model` holds one session: feed it key names with `key()`, sizes with `resize()`, gravity steps with `tick()`, and draw it with `view()`. `termfolio.terminal.run_session()` drives a model from any key reader and writer.
- `termfolio.tetris.TetrisGame` is the game on its own, with `move_left`, `move_right`, `soft_drop`, `rotate_cw`, `tick_gravity`, `retry`, `grid` and `render_lines`.

## What it does not do

- The HTTP server speaks plain HTTP only; there is no TLS.
- The SSH server does not authenticate anyone: every user name is let in without a password or key.