"""
Modelo de dominio para trabajadores sujetos a evaluación de desempeño.
Núcleo del dominio - puro, sin dependencias externas.
"""

from typing import Dict, Any, Optional
from dataclasses import dataclass


@dataclass(frozen=True)
class Worker:
    """
    Modelo de dominio para un trabajador.

    Las fechas se conservan tal como llegan del origen de datos; el motor
    de cumplimiento se encarga de interpretarlas y de marcar como inválido
    a quien tenga una fecha de ingreso ilegible.

    Responsabilidades:
    - Mantener la información del trabajador
    - Indicar si sus evaluaciones requieren aprobación de un observador
    - Exponer los datos que muestran los listados
    """

    id: str
    hire_date: Optional[str]
    annual_anchor_date: Optional[str] = None
    observer_email: Optional[str] = None
    active: bool = True
    first_names: str = ""
    last_names: str = ""
    national_id: str = ""
    code: str = ""
    position: str = ""
    evaluator_email: Optional[str] = None
    area_leader_email: Optional[str] = None

    @property
    def has_observer(self) -> bool:
        """Indica si las evaluaciones requieren visto bueno de un observador."""
        return bool(self.observer_email and self.observer_email.strip())

    @property
    def full_name(self) -> str:
        """Nombre completo en el orden de los listados (apellidos primero)."""
        return f"{self.last_names} {self.first_names}".strip()

    @property
    def assigned_evaluator(self) -> Optional[str]:
        """Evaluador asignado; si no hay uno explícito se usa el líder de área."""
        return self.evaluator_email or self.area_leader_email

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Worker':
        """
        Construye un trabajador a partir de un documento del portal.

        Args:
            data: Documento con las claves del portal (fechaIngreso, Status, ...)

        Returns:
            Worker: Trabajador validado

        Raises:
            ValueError: Si el documento no tiene identificador
        """
        worker_id = data.get("id")
        if not worker_id:
            raise ValueError("El trabajador debe tener un identificador")

        status = data.get("Status", "active")
        if status not in ("active", "inactive"):
            raise ValueError(f"Estado de trabajador inválido: {status}")

        return cls(
            id=str(worker_id),
            hire_date=data.get("fechaIngreso"),
            annual_anchor_date=data.get("fechaEvaluacionAnual") or None,
            observer_email=data.get("observerEmail") or None,
            active=status == "active",
            first_names=data.get("nombres") or "",
            last_names=data.get("apellidos") or "",
            national_id=str(data.get("cedula") or ""),
            code=str(data.get("codigo") or ""),
            position=data.get("cargo") or "",
            evaluator_email=data.get("evaluador") or None,
            area_leader_email=data.get("liderArea") or None
        )

    def __str__(self) -> str:
        """Representación en string del trabajador."""
        state = "activo" if self.active else "inactivo"
        return f"{self.full_name or self.id} ({state})"
