"""Qt application entrypoint for the BeakerLab reaction monitor."""

from __future__ import annotations

import logging
import sys

from PySide6 import QtCore, QtWidgets
from matplotlib.backends.backend_qtagg import FigureCanvasQTAgg
from matplotlib.figure import Figure

from beakerlab.bench import Bench
from beakerlab.constants import COLOR_WATER, PH_CEILING, PH_FLOOR
from beakerlab.errors import BeakerLabError
from beakerlab.gui.monitor import MonitorSession, PourInputs, PourLog
from beakerlab.mixing import MixingEngine
from beakerlab.reference import default_reference_table


class PlotCanvas(FigureCanvasQTAgg):
    def __init__(self, parent: QtWidgets.QWidget | None = None) -> None:
        self.figure = Figure(figsize=(6, 4), tight_layout=True)
        super().__init__(self.figure)
        self.setParent(parent)
        self.axes = self.figure.add_subplot(1, 1, 1)

    def plot_log(self, log: PourLog) -> None:
        index, ph = log.ph_series()
        self.axes.clear()
        self.axes.plot(index, ph, marker="o", label=f"pH ({log.vessel_id})")
        self.axes.axhline(7.0, color="gray", linewidth=0.8, linestyle="--")
        self.axes.set_ylim(PH_FLOOR - 0.5, PH_CEILING + 0.5)
        self.axes.set_xlabel("Pour #")
        self.axes.set_ylabel("pH")
        self.axes.legend()
        self.draw()


class MonitorWindow(QtWidgets.QMainWindow):
    def __init__(self, session: MonitorSession) -> None:
        super().__init__()
        self.session = session
        self.setWindowTitle("BeakerLab Reaction Monitor")
        self.resize(1000, 600)

        central = QtWidgets.QWidget()
        self.setCentralWidget(central)

        layout = QtWidgets.QHBoxLayout(central)
        form_panel = QtWidgets.QWidget()
        form_layout = QtWidgets.QFormLayout(form_panel)
        form_layout.setLabelAlignment(QtCore.Qt.AlignmentFlag.AlignRight)

        self.vessel_edit = QtWidgets.QLineEdit("beaker1")
        self.chemical_combo = QtWidgets.QComboBox()
        self.chemical_combo.setEditable(True)
        reference = session.bench.engine.reference
        if reference is not None:
            for chemical_id in reference.identifiers():
                self.chemical_combo.addItem(chemical_id)

        self.amount_spin = QtWidgets.QDoubleSpinBox()
        self.amount_spin.setRange(0.1, 100.0)
        self.amount_spin.setDecimals(1)
        self.amount_spin.setValue(1.0)

        form_layout.addRow("Vessel", self.vessel_edit)
        form_layout.addRow("Chemical", self.chemical_combo)
        form_layout.addRow("Amount (ml)", self.amount_spin)

        self.pour_button = QtWidgets.QPushButton("Pour")
        self.pour_button.clicked.connect(self._pour)
        form_layout.addRow(self.pour_button)

        self.readout = QtWidgets.QLabel()
        self.readout.setMinimumHeight(120)
        self.readout.setAlignment(QtCore.Qt.AlignmentFlag.AlignTop)
        form_layout.addRow(self.readout)
        self._show(self.session.bench.summarize(self.vessel_edit.text()).as_text(), COLOR_WATER)

        self.plot_canvas = PlotCanvas()

        layout.addWidget(form_panel, stretch=1)
        layout.addWidget(self.plot_canvas, stretch=2)

    def _show(self, text: str, color: str) -> None:
        self.readout.setText(text)
        self.readout.setStyleSheet(f"background-color: {color}; padding: 6px;")

    def _pour(self) -> None:
        inputs = PourInputs(
            vessel_id=self.vessel_edit.text().strip(),
            chemical_id=self.chemical_combo.currentText().strip(),
            amount=self.amount_spin.value(),
        )
        try:
            summary = self.session.pour(inputs)
        except BeakerLabError as exc:
            QtWidgets.QMessageBox.warning(self, "Pour rejected", str(exc))
            return

        self._show(summary.as_text(), summary.color)
        self.plot_canvas.plot_log(self.session.log_for(inputs.vessel_id))


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    app = QtWidgets.QApplication(sys.argv)
    engine = MixingEngine(reference=default_reference_table(), unknown_chemicals="warn")
    window = MonitorWindow(MonitorSession(Bench(engine)))
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
