# saffron2d

Building blocks for 2D applications, independent of any window or graphics
backend:

- `saffron2d.vector` – `Vector2`, `Vector3` and `Vector4` immutable value types.
- `saffron2d.identifier` – random 64-bit `UUID` handles; `UUID.null()` is zero.
- `saffron2d.subscriber_list` – `SubscriberList`, handlers called in turn until one returns a true value.
- `saffron2d.clock` – a frame `Clock` plus a process-wide clock (`restart()`, `frame_time()`, `elapsed_time()`, `since_start()`), all in seconds.
- `saffron2d.date_time` – `DateTime` with clamped zero-based fields, month/weekday names and `time_string()` / `ansi_date_string()`.
- `saffron2d.wrapper_buffer` – `WrapperBuffer`, a byte buffer whose reads and writes raise `BufferOverflowError` past the end.
- `saffron2d.randomness` – `integer()`, `real()`, `vec2()`, `vec3()`, `vec4()`, `color()` and `RandomGenerator`.
- `saffron2d.run` – `Run`, a scheduler for later, delayed, periodic and per-frame callbacks.
- `saffron2d.batch` – `Batch`, a queue of jobs executed in order on a worker thread, with progress and status.
- `saffron2d.thread_pool` – `ThreadPool`, named jobs on a bounded set of worker threads.
- `saffron2d.filesystem` – `all_files()`, `file_count()`, `write()`, `create_directories()`, `file_exists()`, `copy()` and `Filter`.
- `saffron2d.resource_store` – `ResourceStore`, a path-keyed cache of loaded resources, and `ShaderStore`, which reads shader source files.
- `saffron2d.transform` – a 3×3 affine `Transform` and `Rect`.
- `saffron2d.animation` – frame `Animation` and `AnimatedSprite`.
- `saffron2d.camera` – a 2D `Camera` with pan, zoom, rotation and screen/world mapping.

## Installation

```
pip install saffron2d
```

## Example

```python
from saffron2d.run import Run
from saffron2d.subscriber_list import SubscriberList
from saffron2d.camera import Camera
from saffron2d.vector import Vector2

closed = SubscriberList()
subscription = closed.subscribe(lambda: print("closing") or False)
closed.invoke()
closed.unsubscribe(subscription)

run = Run()
run.after(lambda: print("half a second later"), 0.5)
for _ in range(60):
    run.execute(1 / 60)

camera = Camera()
camera.set_viewport_size(Vector2(800, 600))
camera.set_center(Vector2(100, 50))
print(camera.world_to_screen(Vector2(100, 50)))  # the viewport centre
```

`Camera` reads input through an optional `input_source` callable that returns
an object with `pan`, `swipe`, `scroll`, `rotate_left`, `rotate_right` and
`reset_pressed` attributes; without one, `update()` only follows its target.

## What it does not do

The package opens no window and draws nothing. It has no renderer, no GUI,
no keyboard or mouse handling of its own, and no audio; `ShaderStore` reads
shader source text but does not compile it, and `AnimatedSprite` computes
vertex positions and texture coordinates without rendering them. Hook these
pieces up to whatever windowing and graphics library your application uses.

## Running the tests

```
pip install saffron2d[test]
pytest
```