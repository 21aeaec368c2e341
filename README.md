# drvr

A small learning aid about cars. It has these parts:

- **Car-part tree** (`drvr.car`, `drvr.carpart`): a tree of car parts. Each
  part has components, and each component has a name, an image, a video and a
  description. You can zoom into a part's children, zoom back out, and save the
  tree again.
- **Infographics browser** (`drvr.infographics`): steps through the parts on
  the current level of the tree and lays out the component buttons for the part
  being viewed.
- **Text editor** (`drvr.editor`): an interactive console menu for editing the
  car-part file. It is also available as the `drvr-editor` command.
- **Quiz** (`drvr.quizbank`, `drvr.quiz`): reads a question bank from a text
  file, draws questions at random, scores answers, and runs a one-minute timer.
- **Fuel system** (`drvr.fuel`): a simple model of an engine, a fuel tank and a
  fuel pump.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## The car-part file

The first line gives the number of parts. The second line gives one hierarchy
number per part, separated by commas. A part's hierarchy number is how many
children it has. Its children follow it in depth-first order.

After that, each part appears as a line `name,image,count`. That line is
followed by `count` component lines of the form `name,image,video,description`.
The description is the last field on its line, so it may contain commas.

```
3
2,0,0
Car,car.png,0
Engine,engine.png,1
Piston,piston.png,piston.mp4,Moves up and down, driving the crankshaft
Wheel,wheel.png,0
```

```python
from drvr.car import Car, NavigationError

car = Car()
car.load("parts.txt")            # or car.parse(text)
car.hierarchy_number(0)          # 2: part 0 has two children
car.zoom_in(0)                   # current_parts is now Engine and Wheel
car.zoom_out(1)                  # back to Car
car.reset()                      # back to the top level
print(car.dumps())               # the tree in the file format
car.write("parts.txt")           # defaults to "test.txt"
```

`zoom_in` and `zoom_out` raise `NavigationError` when there is no level to go
to. `Car.parse` raises `ValueError` when the file lists no parts or when the
hierarchy numbers do not fit the number of parts.

Each part is a `CarPart` with `name`, `image`, `components`, `parent_id` and
`siblings`. A part can `add_component`, `remove_component(position)` and
`edit_component(position, name=..., image=..., video=..., description=...)`.
`to_text()` gives the part in the file format. `describe()` gives a readable
summary.

## Browsing the tree

```python
from drvr.infographics import Infographics, split_rows, button_slots

view = Infographics()
view.load("parts.txt")        # defaults to "Car part descriptions.txt"
view.zoom()                   # False if the current part has no children
view.next_part()              # wraps round at the end of the level
view.prev_part()
layout = view.component_layout()
layout.buttons                # Button(row, slot, label) for each component
view.reset()
```

Components are shown on two rows of up to seven buttons. With fewer than four
components they all go on the top row. With four or more they are split into
two rows, and the top row takes the extra one when the count is odd.
`split_rows(count)` gives the sizes of the two rows. `button_slots(count)`
gives the unlabelled layout, including where each row sits. It raises
`ValueError` for counts that have no layout.

## The question bank

The file starts with the number of questions. Each question then gives these
fields, separated by commas:

- the picture flag, `0` or `1`
- the picture path, present only when the flag is `1`
- the question text
- four answers
- the index of the correct answer, counting from 0

Questions are separated by whitespace, such as a new line.

```
2
0,What does FWD mean?,Front Wheel Drive,Forward Wheel Drive,Fast Wheel Drive,Frontal Wheel Drive,0
1,signs/stop.png,What does this sign mean?,Slow down,Stop,Give way,No entry,1
```

```python
import random
from drvr.quizbank import read_question_bank, select_questions
from drvr.quiz import QuizSession, QuizTimer

bank = read_question_bank("questionBank.txt")
session = QuizSession(bank, count=10, rng=random.Random())
session.current_question
session.select_answer(2)      # True if answer 2 (of 1 to 4) is correct
session.next_question()       # None once past the last question
session.jump_to(5)
session.results, session.progress

timer = QuizTimer()
timer.tick()                  # "0:01"; stops counting at one minute
```

`select_questions(bank, count, rng)` draws distinct questions and leaves the
bank unchanged. It raises `ValueError` if the bank is too small.

## The fuel system

```python
from drvr.fuel import FuelSystem

system = FuelSystem()
system.tank.add_fuel(10, petrol=True)
system.engine.start()
system.engine.speed = 200
system.run(5, interval=0)
system.pump.pressure, system.tank.level, system.tank.level_percent
```

While the engine runs, the pump pressure is 0.3 at idle. At speed it rises by
one for every whole 100 of speed. Each pump step drains a tenth of the pressure
from the tank, and the level never drops below zero. When the tank is empty the
engine stops and "Engine has run out of fuel!" is written to the system's
output. When the engine is off, the pump pressure is 0.

## Editing from the console

```
drvr-editor "Car part descriptions.txt" --output test.txt
```

This loads the car-part file and opens the text editor menu. You can rename a
part, change its image, and add, delete or modify its components. Input is read
as single words, so each name, file name or description you enter must be one
word. When you leave the menu, or when input ends, the edited tree is saved to
the `--output` file, which defaults to `test.txt`.

`drvr.editor.print_file(path, out)` copies a file to an output stream line by
line.

## What the package does not do

- There is no graphical interface. Nothing shows images or plays videos. The
  image and video fields are file names that are stored and saved.
- There is no command that runs the quiz or the fuel simulation. Use them from
  Python as shown above.
- The batch editing menu only describes the batch options and lets you pick a
  part. It changes nothing. Use individual editing to make changes.