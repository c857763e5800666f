# drills

A handful of small, self-contained programming drills, each in its own module.
The package has no dependencies beyond the standard library.

## Installing

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## `drills.multiplier`

A function adapter. `Multiplier` is an abstract class with one method,
`multiply(a, b)`. `MultiplierFunc` wraps any two-argument function so that it
satisfies that interface. `multiple_func(a, b)` returns `a * b`.

    from drills.multiplier import MultiplierFunc, multiple_func

    f = MultiplierFunc(multiple_func)
    f.multiply(2, 3)   # 6

From the command line:

    drills-multiplier

prints `6`.

## `drills.reverser`

A small WSGI application that reverses the `arg` query parameter.

- `reverse(s)` returns the string reversed.
- `reverser(environ, start_response)` answers `200` with the reversed `arg`
  as a plain-text body.
- `arg_validator(next_app)` wraps a WSGI app and answers
  `400 Bad Request` with the body `arg is required` when `arg` is missing or
  empty; otherwise it passes the request on.
- `make_app()` builds the routed application: `GET` (or `HEAD`) on
  `/reverser` goes to the validated reverser, any other path answers `404`,
  and any other method answers `405` with an `Allow: GET, HEAD` header.

Serve it with the standard library's `wsgiref` server:

    drills-reverser --port 8080

`--port` defaults to 8080. Then request `/reverser?arg=hello` to get `olleh`.

## `drills.numbernoise`

- `random_n_seconds(precision, lifetime)` returns a generator that yields one
  number every `precision` until `lifetime` has elapsed. Each number is the
  current Unix time in milliseconds multiplied by a random 63-bit integer,
  wrapped to a signed 64-bit value. Durations are given in seconds or as
  `datetime.timedelta`; a `precision` that is not positive raises
  `ValueError`. Ticks missed by a slow reader are dropped, not queued.
- `even_odds(precision, lifetime)` runs that stream on a background thread
  and returns two generators, one of even numbers and one of odd numbers.
  Both end when the lifetime is over, or early if a zero is produced.

## `drills.robot` and `drills.board`

A toy robot on a 5 x 5 table.

`drills.robot` holds `Facing` (`NORTH`, `EAST`, `SOUTH`, `WEST`), the step
functions `move_north`, `move_east`, `move_south` and `move_west`, and
`Robot`, whose `left()` and `right()` turn it a quarter turn (wrapping around
the compass), whose `move(x, y)` returns the square one step ahead, and whose
`validate()` raises `ValueError` for a facing outside the compass.

`drills.board` holds the table:

    from drills.board import new_board, place
    from drills.robot import Facing

    board = new_board(0, 0, Facing.NORTH)
    board.move()
    board.right()
    board.report()   # (0, 1, Facing.EAST)

    board_id = place(2, 2, Facing.SOUTH)   # creates a new board, returns its id

- `new_board(robot_x, robot_y, facing)` creates a board with a fresh id.
  A position off the table or an invalid facing raises `BoardError`
  (a subclass of `ValueError`).
- `Board.move()` / `Board.move_robot()` step the robot forward; a step over
  the edge raises `BoardError` and the robot stays where it was.
- `Board.left()`, `Board.right()` turn the robot; `Board.report()` returns
  `(x, y, facing)`; `Board.validate()` checks the robot's position.

The commands `Place(x, y, facing)`, `Left()`, `Move()` and `Right()` are
subclasses of `Command`; each one's `issue(board)` carries out the matching
action and returns the board's id. `Place.issue` ignores its argument and
creates a new board.

## What is not included

There is no command interpreter for the toy robot: it does not read
`PLACE`, `MOVE`, `LEFT`, `RIGHT` or `REPORT` instructions from a file or the
terminal. Drive it from Python through `Board` and the command classes.