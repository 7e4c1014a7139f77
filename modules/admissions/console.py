"""Text-mode admission desk.

Owns the menu loop and all prompting.  Numeric fields re-prompt until an
integer is entered; an out-of-range service type admits nothing.
"""

from __future__ import annotations

import logging
from typing import Callable

from models.patient import CATEGORY_CHOICES, InvalidCategory, PatientRecord, category_from_choice
from notifications.models.notification import EventKind
from notifications.services.notifier import DESK_LABELS, console_observer
from services.admission_service import AdmissionService, format_patient_details

logger = logging.getLogger(__name__)

_CLEAR = "\033[2J\033[H"

MAIN_MENU = (
    "=== Hospital Management System ===",
    "1. Admit New Patient",
    "2. Exit",
)


class AdmissionConsole:
    def __init__(
        self,
        service: AdmissionService,
        *,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
        clear_screen: bool = True,
    ) -> None:
        self.service = service
        self._input = input_fn
        self._output = output_fn
        self._clear_screen = clear_screen

    def attach_desks(self) -> None:
        """Subscribe the reception and accounts printers to the service's notifier."""

        for kind in EventKind:
            self.service.notifier.subscribe(kind, console_observer(DESK_LABELS[kind], self._output))

    # ----- Menu loop ---------------------------------------------------
    def run(self) -> None:
        try:
            while True:
                if self._clear_screen:
                    self._output(_CLEAR)
                for line in MAIN_MENU:
                    self._output(line)
                try:
                    option = int(self._input("Select Option: "))
                except ValueError:
                    continue

                if option == 1:
                    self.admit_patient_flow()
                elif option == 2:
                    return

                self._input("\nPress Enter to continue...")
        except EOFError:
            logger.debug("Input closed; leaving admission desk")

    # ----- Admission flow ----------------------------------------------
    def admit_patient_flow(self) -> PatientRecord | None:
        patient_id = self._read_int("Enter Patient ID: ")
        name = self._input("Enter Patient Name: ")
        age = self._read_int("Enter Age: ")
        contact = self._input("Enter Contact Number: ")
        symptoms = self._input("Enter Symptoms: ")

        self._output("\nSelect Service Type")
        for number, category in CATEGORY_CHOICES.items():
            self._output(f"{number}. {category.value}")
        choice = self._read_int("Choice: ")

        try:
            category = category_from_choice(choice)
        except InvalidCategory:
            logger.warning("Rejected admission for patient %s: service type %s", patient_id, choice)
            self._output("Invalid service type")
            return None

        patient = PatientRecord(
            patient_id=patient_id,
            name=name,
            age=age,
            contact_number=contact,
            symptoms=symptoms,
            category=category,
        )

        self.service.admit_patient(patient)
        amount = self.service.apply_billing(patient)
        self._output("")
        for line in format_patient_details(patient):
            self._output(line)
        self.service.generate_bill(patient, amount)
        return patient

    def _read_int(self, prompt: str) -> int:
        while True:
            raw = self._input(prompt)
            try:
                return int(raw.strip())
            except ValueError:
                self._output("Please enter a whole number.")


__all__ = ["AdmissionConsole", "MAIN_MENU"]
