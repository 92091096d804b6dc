# lyrasynth

A compact software synthesizer: MIDI note events go in, blocks of
stereo samples come out.

The package is made of a few small pieces:

- `lyrasynth.midi`: `MidiEvent` (a status byte, two data bytes and a
  delta-frame count; bytes outside 0–255 raise `ValueError`) and
  `MidiEventQueue`, a thread-safe FIFO of `(event, frame_offset)` pairs
  with `push`, `pop` (raises `IndexError` when empty), `clear` and `len()`.
- `lyrasynth.processor`: the abstract `AudioProcessor` base class. A
  processor implements `process_audio(num_samples)`, returning a
  `(left, right)` pair of sample lists, `process_midi_event(event)`, and
  the `sample_rate` and `block_size` properties.
- `lyrasynth.sine_wave`: `SineWaveProcessor`, a monophonic sine oscillator
  with a linear attack/release envelope (`EnvelopeStage`). The pitch
  follows the MIDI note number (A4 = note 69 = 440 Hz) and the peak level
  is `velocity % 127 / 127`. A note-on with velocity 0 counts as a
  note-off. A zero-length attack or release takes effect at once.
- `lyrasynth.host`: `Host`, which queues incoming notes and hands them,
  together with block render requests, to the active processor.
- `lyrasynth.audio`: `to_pcm16`, which interleaves two channels into
  little-endian signed 16-bit PCM (clipping to the 16-bit range), and
  `AudioOutput`, which runs a background thread that pulls blocks from the
  host, converts them and passes them to a sink you supply.
- `lyrasynth.cli`: a command that renders a random pentatonic melody into
  a WAV file, and `render_melody`, the generator behind it.

The package has no third-party dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Using it as a library

```python
from lyrasynth.host import Host
from lyrasynth.sine_wave import SineWaveProcessor

osc = SineWaveProcessor(44100, 512)
osc.set_envelope(25.0, 25.0)  # attack and release in milliseconds

host = Host()
host.use_processor(osc)

host.send_midi_note(69, 100, True)       # note on: A4, velocity 100
host.process_midi_events()
left, right = host.process_audio(512)    # render one block of samples

host.send_midi_note(69, 0, False)        # note off
host.process_midi_events()
left, right = host.process_audio(512)    # the release fades the note out
```

Notes sent with `send_midi_note` are queued and only reach the processor
when `process_midi_events` is called, so one thread can send notes while
another renders audio. With no processor set, `Host.process_audio`
returns silence, queued events are dropped, and reading `sample_rate` or
`block_size` raises `RuntimeError`.

### Streaming with `AudioOutput`

```python
from lyrasynth.audio import AudioOutput

played = []

def sink(buffer):
    played.append(bytes(buffer))
    output.release(buffer)   # hand the buffer back to the pool

output = AudioOutput(host, sink, buffer_count=8)
with output:
    host.send_midi_note(69, 100, True)
    ...
```

Entering the context manager calls `initialize` (if it has not been
called) to allocate `buffer_count` buffers of `block_size * 4` bytes,
then `start`s the rendering thread; leaving it calls `stop`. The thread
only renders when a buffer is free, so a sink that never calls `release`
stops the stream once the pool is used up. `start` raises `RuntimeError`
before `initialize` or while already running.

## Command line

```
lyrasynth
```

renders 16 random notes from a pentatonic scale with the sine-wave
synthesizer into `lyra.wav` (44.1 kHz, stereo, 16-bit), printing each
note and its velocity. Each note sounds for 100 ms and is followed by a
25 ms gap; velocities cycle through 50, 75, 100 and 25.

Options:

- `--notes N` – number of notes (default 16, must not be negative)
- `--output PATH` – WAV file to write (default `lyra.wav`)
- `--seed N` – seed for the note choice, for repeatable output
- `--sample-rate HZ` – sample rate (default 44100)
- `--block-size N` – samples per rendered block (default 512)
- `--attack MS`, `--release MS` – envelope times in milliseconds
  (default 25 each)

## What it does not do

The package does not talk to a sound card or any audio device, and it
does not read MIDI from hardware or files. `AudioOutput` only hands PCM
buffers to the sink you give it, and the command writes a WAV file rather
than playing sound live.