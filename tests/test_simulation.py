import csv
import io

import pytest

from colasim.lcgrand import LCGRand
from colasim.simulation import (
    NEVER,
    QUEUE_LIMIT,
    CustomerRecord,
    EmptyEventListError,
    EventLog,
    EventType,
    Parameters,
    QueueOverflowError,
    QueueSimulator,
    ServerStatus,
    Statistics,
    exponential,
    main,
    read_parameters,
    run_simulation,
)


def make_sim(required=20, log=None):
    return QueueSimulator(Parameters(1.0, 0.5, required), LCGRand(), log)


def test_exponential_is_deterministic_and_positive():
    first = LCGRand()
    second = LCGRand()
    draws = [exponential(2.0, first) for _ in range(200)]
    assert draws == [exponential(2.0, second) for _ in range(200)]
    assert all(x > 0 for x in draws)


def test_read_parameters(tmp_path):
    path = tmp_path / "param.txt"
    path.write_text("1.0 0.5 1000\n")
    assert read_parameters(path) == Parameters(1.0, 0.5, 1000)


def test_read_parameters_incomplete(tmp_path):
    path = tmp_path / "param.txt"
    path.write_text("1.0\n")
    with pytest.raises(ValueError):
        read_parameters(path)


def test_initialize_schedules_first_arrival():
    sim = make_sim()
    assert sim.time == 0.0
    assert sim.server_status is ServerStatus.IDLE
    assert sim.next_event_time[EventType.ARRIVAL] > 0.0
    assert sim.next_event_time[EventType.DEPARTURE] == NEVER
    assert sim.stats == Statistics()


def test_timing_picks_earliest_event():
    sim = make_sim()
    sim.next_event_time[EventType.ARRIVAL] = 5.0
    sim.next_event_time[EventType.DEPARTURE] = 2.5
    assert sim.timing() is EventType.DEPARTURE
    assert sim.time == 2.5


def test_timing_prefers_arrival_on_tie():
    sim = make_sim()
    sim.next_event_time[EventType.ARRIVAL] = 4.0
    sim.next_event_time[EventType.DEPARTURE] = 4.0
    assert sim.timing() is EventType.ARRIVAL


def test_timing_empty_list():
    sim = make_sim()
    sim.next_event_time[EventType.ARRIVAL] = NEVER
    with pytest.raises(EmptyEventListError):
        sim.timing()


def test_update_time_averages():
    sim = make_sim()
    sim.server_status = ServerStatus.BUSY
    sim.queue.extend([CustomerRecord(1), CustomerRecord(2)])
    sim.time = 3.0
    sim.update_time_averages()
    assert sim.time_last_event == sim.time
    assert sim.stats.area_num_in_q == 2 * 3.0
    assert sim.stats.area_server_status == 3.0


def test_arrival_when_idle_starts_service():
    sim = make_sim()
    sim.timing()
    sim.arrive()
    assert sim.server_status is ServerStatus.BUSY
    assert sim.stats.num_custs_delayed == 1
    assert sim.next_event_time[EventType.DEPARTURE] > sim.time
    assert sim.in_service.number == 1
    assert sim.in_service.interarrival == sim.time


def test_arrival_when_busy_queues_customer():
    sim = make_sim()
    sim.server_status = ServerStatus.BUSY
    sim.time = 1.5
    sim.arrive()
    assert len(sim.queue) == 1
    assert sim.queue[0].arrival_time == 1.5
    assert sim.stats.num_custs_delayed == 0


def test_queue_overflow():
    sim = make_sim()
    sim.server_status = ServerStatus.BUSY
    for _ in range(QUEUE_LIMIT):
        sim.arrive()
    assert len(sim.queue) == QUEUE_LIMIT
    with pytest.raises(QueueOverflowError):
        sim.arrive()


def test_departure_with_empty_queue_frees_server():
    sim = make_sim()
    sim.timing()
    sim.arrive()
    sim.time = sim.next_event_time[EventType.DEPARTURE]
    sim.depart()
    assert sim.server_status is ServerStatus.IDLE
    assert sim.next_event_time[EventType.DEPARTURE] == NEVER
    assert sim.in_service == CustomerRecord()


def test_departure_serves_head_of_queue():
    sim = make_sim()
    sim.server_status = ServerStatus.BUSY
    sim.queue.append(CustomerRecord(7, 0.2, 0.0, 1.0))
    sim.queue.append(CustomerRecord(8, 0.3, 0.0, 1.3))
    sim.time = 4.0
    sim.depart()
    assert sim.stats.total_of_delays == 4.0 - 1.0
    assert sim.stats.num_custs_delayed == 1
    assert sim.in_service.number == 7
    assert [c.number for c in sim.queue] == [8]


def test_event_log_format():
    buffer = io.StringIO()
    log = EventLog(buffer)
    log.write_customer(CustomerRecord(0, 1.0, 2.0))
    log.write_customer(CustomerRecord(3, 1.0, 2.0))
    lines = buffer.getvalue().splitlines()
    assert lines[0] == "Cliente,Tiempo_Entre_Llegadas(seg),Tiempo_Atencion(seg)"
    assert lines[1:] == ["3,60.000000,120.000000"]


def test_run_reaches_required_count_and_invariants():
    sim = make_sim(required=200)
    stats = sim.run()
    assert stats.num_custs_delayed == 200
    assert stats.total_of_delays >= 0.0
    assert 0.0 <= stats.area_server_status <= sim.time
    assert stats.area_num_in_q >= 0.0


def test_run_is_reproducible():
    first = make_sim(required=100)
    second = make_sim(required=100)
    assert first.run() == second.run()
    assert first.report() == second.report()


def test_report_contents():
    sim = make_sim(required=30)
    sim.run()
    text = sim.report()
    assert "==== REPORTE FINAL DE SIMULACIÓN ====" in text
    assert text.rstrip().endswith("Total de clientes atendidos: 30")


def test_run_simulation_files(tmp_path):
    params = tmp_path / "param.txt"
    params.write_text("1.0 0.5 50")
    results = tmp_path / "result.txt"
    log = tmp_path / "eventos.csv"
    stats = run_simulation(params, results, log)
    assert stats.num_custs_delayed == 50
    text = results.read_text(encoding="utf-8")
    assert text.startswith("Sistema de Colas Simple - Implementación Modular")
    assert "Total de clientes atendidos: 50" in text
    with open(log, encoding="utf-8", newline="") as handle:
        rows = list(csv.reader(handle))
    body = rows[1:]
    assert len(body) <= 50
    assert [int(row[0]) for row in body] == list(range(1, len(body) + 1))
    assert all(float(row[2]) > 0 for row in body)


def test_main_success(tmp_path):
    params = tmp_path / "param.txt"
    params.write_text("1.0 0.5 25")
    results = tmp_path / "result.txt"
    log = tmp_path / "log.csv"
    assert main([str(params), str(results), str(log)]) == 0
    assert "Total de clientes atendidos: 25" in results.read_text(encoding="utf-8")


def test_main_queue_overflow(tmp_path):
    params = tmp_path / "param.txt"
    params.write_text("0.001 1000.0 1000")
    code = main([str(params), str(tmp_path / "r.txt"), str(tmp_path / "l.csv")])
    assert code == 2


def test_main_missing_parameters(tmp_path):
    code = main([str(tmp_path / "missing.txt"), str(tmp_path / "r.txt"),
                 str(tmp_path / "l.csv")])
    assert code == 1