from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterable, Mapping

from core.exceptions import DomainError
from core.models import Task
from core.services.pert import PertEngine, PertResult
from core.services.reconciliation import ReconciliationReport, ensure_consistent, reconcile
from core.services.scheduling import CPMResult, SchedulingEngine, build_task_graph
from infra.operational_support import bind_trace_id
from infra.settings import EngineSettings, load_settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScheduleAnalysis:
    trace_id: str
    cpm: CPMResult
    pert: PertResult
    reconciliation: ReconciliationReport

    def as_dict(self) -> dict[str, Any]:
        return {
            "traceId": self.trace_id,
            "cpm": self.cpm.to_dict(),
            "pert": self.pert.to_dict(),
            "consistent": self.reconciliation.is_consistent,
        }


@dataclass
class ServiceGraph:
    settings: EngineSettings
    scheduling_engine: SchedulingEngine
    pert_engine: PertEngine

    def as_dict(self) -> dict[str, Any]:
        return {
            "settings": self.settings,
            "scheduling_engine": self.scheduling_engine,
            "pert_engine": self.pert_engine,
        }

    def analyze(
        self,
        tasks: Iterable[Task | Mapping[str, Any]],
        trace_id: str | None = None,
    ) -> ScheduleAnalysis:
        """
        Run CPM and PERT over the same task list under one trace id.
        Validation happens once; both engines get the same TaskGraph.
        """
        with bind_trace_id(trace_id) as bound:
            try:
                graph = build_task_graph(tasks)
            except DomainError as exc:
                logger.warning("Schedule analysis rejected [%s]: %s", exc.code, exc)
                raise
            cpm = self.scheduling_engine.calculate_graph(graph)
            pert = self.pert_engine.calculate_graph(graph)
            if self.settings.strict_reconciliation:
                report = ensure_consistent(cpm, pert)
            else:
                report = reconcile(cpm, pert)
                if not report.is_consistent:
                    logger.warning(report.summary())
            return ScheduleAnalysis(trace_id=bound, cpm=cpm, pert=pert, reconciliation=report)


def build_service_graph(settings: EngineSettings | None = None) -> ServiceGraph:
    return ServiceGraph(
        settings=settings or load_settings(),
        scheduling_engine=SchedulingEngine(),
        pert_engine=PertEngine(),
    )


def build_service_dict(settings: EngineSettings | None = None) -> dict[str, Any]:
    return build_service_graph(settings).as_dict()
