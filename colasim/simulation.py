"""Discrete-event simulation of a single-server queue."""

from __future__ import annotations

import argparse
import math
import sys
from collections import deque
from dataclasses import dataclass, field, replace
from enum import IntEnum
from typing import Deque, Optional, TextIO

from colasim.lcgrand import LCGRand

QUEUE_LIMIT = 100
NEVER = 1.0e30
_EMPTY_THRESHOLD = 1.0e29
_RANDOM_STREAM = 1


class ServerStatus(IntEnum):
    IDLE = 0
    BUSY = 1


class EventType(IntEnum):
    ARRIVAL = 1
    DEPARTURE = 2


class QueueOverflowError(RuntimeError):
    """Raised when more customers wait than the queue can hold."""


class EmptyEventListError(RuntimeError):
    """Raised when no event is scheduled."""


@dataclass
class Parameters:
    mean_interarrival: float
    mean_service: float
    num_delays_required: int
    num_events: int = 2


@dataclass
class CustomerRecord:
    number: int = 0
    interarrival: float = 0.0
    service: float = 0.0
    arrival_time: float = 0.0


@dataclass
class Statistics:
    num_custs_delayed: int = 0
    total_of_delays: float = 0.0
    area_num_in_q: float = 0.0
    area_server_status: float = 0.0


class EventLog:
    """CSV log of served customers, times in seconds."""

    HEADER = "Cliente,Tiempo_Entre_Llegadas(seg),Tiempo_Atencion(seg)\n"

    def __init__(self, stream: TextIO):
        self.stream = stream
        stream.write(self.HEADER)

    def write_customer(self, customer: CustomerRecord) -> None:
        """Append a row for ``customer`` unless it is an empty record."""
        if customer.number <= 0:
            return
        self.stream.write(
            f"{customer.number},{customer.interarrival * 60.0:.6f},"
            f"{customer.service * 60.0:.6f}\n"
        )
        self.stream.flush()


def exponential(mean: float, rng: LCGRand) -> float:
    """Draw an exponential variate with the given mean."""
    return -mean * math.log(rng.next(_RANDOM_STREAM))


def read_parameters(path) -> Parameters:
    """Read mean interarrival, mean service and customer count from a file."""
    with open(path, encoding="utf-8") as handle:
        fields = handle.read().split()
    if len(fields) < 3:
        raise ValueError(f"expected three parameters in {path}")
    return Parameters(float(fields[0]), float(fields[1]), int(fields[2]))


class QueueSimulator:
    """Single-server FIFO queue with exponential arrivals and service."""

    def __init__(self, params: Parameters, rng: Optional[LCGRand] = None,
                 log: Optional[EventLog] = None):
        self.params = params
        self.rng = rng if rng is not None else LCGRand()
        self.log = log
        self.customer_count = 0
        self.last_arrival_time: Optional[float] = None
        self.in_service = CustomerRecord()
        self.initialize()

    def initialize(self) -> None:
        """Reset the clock, state and statistics and schedule the first arrival."""
        self.time = 0.0
        self.time_last_event = 0.0
        self.server_status = ServerStatus.IDLE
        self.queue: Deque[CustomerRecord] = deque()
        self.stats = Statistics()
        self.next_event_time = {
            EventType.ARRIVAL: self.time + exponential(self.params.mean_interarrival, self.rng),
            EventType.DEPARTURE: NEVER,
        }

    def timing(self) -> EventType:
        """Advance the clock to the most imminent event and return its type."""
        min_time = _EMPTY_THRESHOLD
        chosen: Optional[EventType] = None
        for event in list(EventType)[: self.params.num_events]:
            if self.next_event_time[event] < min_time:
                min_time = self.next_event_time[event]
                chosen = event
        if chosen is None:
            raise EmptyEventListError(f"La lista de eventos está vacía en tiempo {self.time:f}")
        self.time = min_time
        return chosen

    def update_time_averages(self) -> None:
        """Accumulate the time-weighted areas since the last event."""
        elapsed = self.time - self.time_last_event
        self.time_last_event = self.time
        self.stats.area_num_in_q += len(self.queue) * elapsed
        self.stats.area_server_status += int(self.server_status) * elapsed

    def arrive(self) -> None:
        """Handle an arrival event."""
        if self.last_arrival_time is None:
            interarrival = self.time
        else:
            interarrival = self.time - self.last_arrival_time
        self.last_arrival_time = self.time
        self.customer_count += 1

        self.next_event_time[EventType.ARRIVAL] = self.time + exponential(
            self.params.mean_interarrival, self.rng
        )

        if self.server_status is ServerStatus.BUSY:
            if len(self.queue) >= QUEUE_LIMIT:
                raise QueueOverflowError(
                    f"Desbordamiento de la cola en tiempo {self.time:f}"
                )
            self.queue.append(
                CustomerRecord(self.customer_count, interarrival, 0.0, self.time)
            )
        else:
            self.stats.total_of_delays += 0.0
            self.stats.num_custs_delayed += 1
            self.server_status = ServerStatus.BUSY
            service = exponential(self.params.mean_service, self.rng)
            self.next_event_time[EventType.DEPARTURE] = self.time + service
            self.in_service = CustomerRecord(
                self.customer_count, interarrival, service, self.time
            )

    def depart(self) -> None:
        """Handle a departure event."""
        if self.log is not None:
            self.log.write_customer(self.in_service)

        if not self.queue:
            self.server_status = ServerStatus.IDLE
            self.next_event_time[EventType.DEPARTURE] = NEVER
            self.in_service = CustomerRecord()
            return

        head = self.queue.popleft()
        self.stats.total_of_delays += self.time - head.arrival_time
        self.stats.num_custs_delayed += 1
        service = exponential(self.params.mean_service, self.rng)
        self.next_event_time[EventType.DEPARTURE] = self.time + service
        self.in_service = replace(head, service=service)

    def run(self) -> Statistics:
        """Process events until the required number of customers has been delayed."""
        handlers = {EventType.ARRIVAL: self.arrive, EventType.DEPARTURE: self.depart}
        while self.stats.num_custs_delayed < self.params.num_delays_required:
            event = self.timing()
            self.update_time_averages()
            handlers[event]()
        return self.stats

    def report(self) -> str:
        """Return the final report text."""
        stats = self.stats
        average_delay = _ratio(stats.total_of_delays, stats.num_custs_delayed)
        average_in_queue = _ratio(stats.area_num_in_q, self.time)
        utilization = _ratio(stats.area_server_status, self.time)
        return (
            "\n\n==== REPORTE FINAL DE SIMULACIÓN ====\n"
            f"Espera promedio en la cola: {average_delay:11.3f} minutos\n"
            f"Número promedio en cola: {average_in_queue:10.3f}\n"
            f"Utilización del servidor: {utilization:15.3f}\n"
            f"Tiempo total de simulación: {self.time:12.3f} minutos\n"
            f"Total de clientes atendidos: {stats.num_custs_delayed}\n"
        )


def _ratio(numerator: float, denominator: float) -> float:
    if denominator == 0:
        return math.nan
    return numerator / denominator


def _header(params: Parameters) -> str:
    return (
        "Sistema de Colas Simple - Implementación Modular\n\n"
        f"Tiempo promedio de llegada: {params.mean_interarrival:11.3f} minutos\n"
        f"Tiempo promedio de atención: {params.mean_service:16.3f} minutos\n"
        f"Número de clientes objetivo: {params.num_delays_required:14d}\n\n"
    )


def run_simulation(parameters_path, results_path,
                   log_path="eventos_clientes.csv") -> Statistics:
    """Run a simulation from a parameter file, writing results and a customer log."""
    params = read_parameters(parameters_path)
    with open(results_path, "w", encoding="utf-8") as results, \
            open(log_path, "w", encoding="utf-8", newline="") as log_file:
        log = EventLog(log_file)
        results.write(_header(params))
        simulator = QueueSimulator(params, LCGRand(), log)
        simulator.run()
        results.write(simulator.report())
    return simulator.stats


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Simulate a single-server queue.")
    parser.add_argument("parameters", nargs="?", default="param.txt")
    parser.add_argument("results", nargs="?", default="result.txt")
    parser.add_argument("log", nargs="?", default="eventos_clientes.csv")
    args = parser.parse_args(argv)
    try:
        run_simulation(args.parameters, args.results, args.log)
    except QueueOverflowError as exc:
        print(exc, file=sys.stderr)
        return 2
    except EmptyEventListError as exc:
        print(exc, file=sys.stderr)
        return 1
    except (OSError, ValueError) as exc:
        print(f"Error al abrir archivos: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())