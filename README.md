# colasim

A discrete-event simulation of a single-server queue. Customers arrive with
exponentially distributed interarrival times, wait in a first-in, first-out
line of at most 100 customers, and are served one at a time with
exponentially distributed service times. The run stops once the requested
number of customers has started service.

Random numbers come from a multiplicative congruential generator with fixed
seed streams (numbered 0 to 100; the simulation draws from stream 1), so
every run with the same parameters gives the same results.

## Installation

```
pip install .
```

## Running a simulation

Write a parameter file holding three whitespace-separated values:

1. the mean time between arrivals, in minutes;
2. the mean service time, in minutes;
3. the number of customers whose delays are to be measured.

For example, `param.txt`:

```
1.0 0.5 1000
```

Then run:

```
colasim
```

The command takes up to three optional positional arguments, the parameter
file, the results file and the customer log, which default to `param.txt`,
`result.txt` and `eventos_clientes.csv`:

```
colasim param.txt result.txt eventos_clientes.csv
```

Two files are written (their text is in Spanish):

- the results file: the input parameters followed by the final report:
  average delay in queue, time-average number in queue, server utilisation,
  total simulated time and number of customers who started service.
- the customer log, a CSV file with the header
  `Cliente,Tiempo_Entre_Llegadas(seg),Tiempo_Atencion(seg)` and one row per
  customer who completed service: the customer number, the time since the
  previous arrival (for the first customer, since the start) and the service
  time, both in seconds. A customer still in service when the run stops is
  not logged.

The command exits with status 0 on success, 2 if the queue overflows, and 1
if the event list is empty or a file cannot be read or written, or the
parameter file holds fewer than three values.

## Using it from Python

```python
from colasim.simulation import read_parameters, run_simulation

params = read_parameters("param.txt")
stats = run_simulation("param.txt", "result.txt", "eventos_clientes.csv")
print(stats.num_custs_delayed, stats.total_of_delays)
```

The lower-level pieces are available too:

- `colasim.lcgrand.LCGRand` is the random-number generator; `next(stream)`
  returns a uniform value in (0, 1), and `seed(stream, value)` and
  `state(stream)` set and read a stream's state.
- `colasim.simulation.QueueSimulator(params, rng=None, log=None)` drives the
  event loop over a `Parameters` value, an optional generator and an optional
  `EventLog`. `run()` processes events and returns the `Statistics`;
  `report()` returns the final report text, with `nan` for any average whose
  denominator is zero.
- `colasim.simulation.EventLog` writes the customer CSV to any text stream.
- `colasim.simulation.exponential(mean, rng)` draws one exponential variate.

A queue that grows beyond its limit raises `QueueOverflowError`; an event
list with nothing scheduled raises `EmptyEventListError`.

## Limitations

There is one server, one queue and one random stream; the distributions are
fixed as exponential and the generator's seeds are fixed unless set through
`LCGRand.seed`.

## Running the tests

```
pip install ".[test]"
pytest
```