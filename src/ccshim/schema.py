from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel

from ccshim.plan import InvocationPlan


class InvocationDTO(BaseModel):
    name: str
    args: List[str]


class InvocationPlanDTO(BaseModel):
    invocation: InvocationDTO
    command: str
    role: str
    role_tag: str
    language: Optional[str] = None
    rpath: bool = False
    accelerator: Optional[str] = None
    final_args: List[str] = []
    exec_argv: List[str] = []
    search_path: str = ""

    @classmethod
    def from_plan(cls, plan: InvocationPlan) -> "InvocationPlanDTO":
        return cls(
            invocation=InvocationDTO(
                name=plan.invocation.name,
                args=list(plan.invocation.args),
            ),
            command=plan.command,
            role=plan.role.label,
            role_tag=plan.role.value,
            language=plan.language.value if plan.language is not None else None,
            rpath=plan.rpath,
            accelerator=plan.accelerator,
            final_args=list(plan.final_args),
            exec_argv=plan.exec_argv(),
            search_path=plan.search_path,
        )
