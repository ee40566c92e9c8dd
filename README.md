# patternkit

patternkit gathers short examples of sixteen classic design patterns. Each
pattern is one self-contained module with a few cooperating classes and a
`main()` function that runs a short demonstration. The classes return their
messages as strings (or lists of lines) instead of printing them, so they are
easy to inspect and test; only `main()` prints.

| Module | Pattern | Example domain |
| --- | --- | --- |
| `patternkit.abstract_factory` | Abstract Factory | Modern and Victorian furniture |
| `patternkit.bridge` | Bridge | Devices and their remotes |
| `patternkit.builder` | Builder | Building a wooden house |
| `patternkit.chain` | Chain of Responsibility | Approving leave requests |
| `patternkit.command` | Command | Waiter, orders and chef |
| `patternkit.composite` | Composite | Departments and developers |
| `patternkit.decorator` | Decorator | Coffee with toppings |
| `patternkit.facade` | Facade | Hotel services and menus |
| `patternkit.factory` | Factory | Cars and bikes made by name |
| `patternkit.flyweight` | Flyweight | Shared classroom chair types |
| `patternkit.iterator` | Iterator | Walking a playlist |
| `patternkit.observer` | Observer | Channel subscribers |
| `patternkit.proxy` | Proxy | PIN-protected ATM access |
| `patternkit.singleton` | Singleton | A single shared printing press |
| `patternkit.state` | State | Traffic light cycle |
| `patternkit.strategy` | Strategy | Ways to get to the airport |

There are no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Running the demonstrations

Each pattern has its own command. Most take no arguments:

```
patternkit-bridge
patternkit-builder
patternkit-chain
patternkit-command
patternkit-composite
patternkit-flyweight
patternkit-observer
patternkit-state
patternkit-strategy
```

Some accept optional arguments:

- `patternkit-abstract-factory [modern|victorian]` builds a chair and a sofa of
  the chosen style (default `modern`).
- `patternkit-decorator [milk|sugar|cream ...]` wraps a simple coffee in the
  given toppings, in order (default `milk sugar`), then prints its description
  and total cost.
- `patternkit-factory [TYPE]` makes and drives a `car` (the default) or a
  `bike`; any other type prints an error and exits with status 1.
- `patternkit-iterator [SONG ...]` plays the given songs, or a built-in
  playlist when none are given.

Three commands need input or write a file:

- `patternkit-facade [CHOICE]` cleans and decorates the room, then shows the
  menu for the chosen cuisine (1 Thai, 2 Italian, 3 Japanese). Without an
  argument it asks for the choice; anything else prints `Invalid choice!`.
- `patternkit-proxy [PIN]` logs in to the ATM, shows the balance, withdraws,
  deposits, shows the balance again and logs out. Without an argument it asks
  for the PIN; a wrong PIN exits with status 1. The PIN the demonstration
  accepts is `patternkit.proxy.DEFAULT_PIN`.
- `patternkit-singleton [--path FILE]` appends three lines of news to a file,
  `newspaper.txt` in the current directory unless `--path` is given.

## Using the classes

Decorators wrap a coffee one layer at a time:

```python
from patternkit.decorator import AddMilk, AddSugar, SimpleCoffee

coffee = AddSugar(AddMilk(SimpleCoffee()))
coffee.description()  # "Simple Coffee + Milk + Sugar"
coffee.cost()         # 80
```

A leave request moves along a chain of handlers until one of them accepts it.
`set_next` returns the handler it was given, so links can be chained:

```python
from patternkit.chain import OfficeDirector, OfficeHR, OfficeManager

manager = OfficeManager()
manager.set_next(OfficeHR()).set_next(OfficeDirector())

manager.handle_request(4)  # "HR can approve the leave"
```

A request that no handler in the chain accepts returns `None`.

Other behaviour worth knowing:

- `VehicleFactory.create_vehicle` raises `ValueError` for an unknown type.
- `ChairFactory.get_chair` returns the same `ChairType` object for the same
  design, colour and material; `len(factory)` counts the distinct types.
- `Playlist` is iterable, and `Playlist.create_iterator()` returns a
  `PlaylistIterator` that also offers `has_next()`.
- `YoutubeChannel.upload_video` returns the upload line followed by one
  notification per subscriber; `unsubscribe` removes every subscription of
  that subscriber.
- `AtmProxy` raises `NotAuthenticatedError` for any operation before a
  successful `login(pin)`; `BankAccount.withdraw` raises
  `InsufficientBalanceError` when the amount exceeds the balance. Both derive
  from `AtmError`.
- `PrintingPress` cannot be constructed directly (`TypeError`); use
  `PrintingPress.get_instance(path=None)`. Asking for a different path while a
  press is open raises `ValueError`. `close()` closes the file, after which the
  next `get_instance` opens a new press.
- `TrafficLight.request_change()` cycles Red, Green, Yellow and back to Red,
  returning a description of each transition.