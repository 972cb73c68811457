"""Package boundary for setup step orchestration.

This package provides the import root for the setup pipeline: the
subprocess runner, the step implementations, the outcome/status helpers
and the orchestrator that sequences them. The module is intentionally
lightweight and does not contain business logic.

Typical usage::

    from gildsmith_init.setup.pipeline import orchestrator
    orchestrator.run_setup(context)

"""
