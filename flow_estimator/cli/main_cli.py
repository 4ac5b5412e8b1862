"""
CLI para estimar el caudal en una tubería presurizada.

CLI to estimate the flow rate through a pressurized pipe.

Flujo de la CLI / CLI flow:
  1) Eliges idioma / You choose the language
  2) Ingresas presión, fluido, longitud, diámetro, material y desnivel
     You enter pressure, fluid, length, diameter, material and elevation
  3) Se resuelve la velocidad por punto fijo (Swamee-Jain) y se muestra
     caudal, velocidad y presión disponible
     The velocity is solved by fixed-point iteration (Swamee-Jain) and
     flow rate, velocity and available pressure are shown

  - En cualquier pregunta / At any prompt:
        * 'm' o 'menu' / 'main' / 'back'      -> volver al menú principal / go back to main menu
        * 'q', 'salir', 'exit', 'quit'       -> salir del programa / quit program

Modo no interactivo / Non-interactive mode:

    pipe-flow --pressure 3 --length 450 --diameter 90 --fluid water --material PE
    pipe-flow --pressure 3 --length 450 --diameter 90 --json
    pipe-flow --pressure 3 --length 450 --diameter 90 --sweep-pressure 1 5 9
"""

import argparse
import json
import logging
import math
import sys
from typing import Any, List, Optional

from flow_estimator.core.properties import FLUIDS, MATERIALS, get_fluid_label, get_material_label
from flow_estimator.cli.form_session import FormSession
from flow_estimator.services.flow_service import InputSet
from flow_estimator.services.sweep_service import FlowCurve, pressure_range, sweep_pressure

# ==========================
# Idioma global / Global language
# ==========================

LANG: str = "es"  # "es" (español) / "en" (english)

def _set_language() -> None:
    """Pregunta idioma al usuario / Ask user for language."""
    global LANG
    print("============================================")
    print("Seleccionar idioma / Select language:")
    print("  1) Español")
    print("  2) English")
    while True:
        choice = input("Opción [1/2, por defecto 1 / default 1]: ").strip()
        if choice == "" or choice == "1":
            LANG = "es"
            print("\nIdioma seleccionado: Español\n")
            return
        elif choice == "2":
            LANG = "en"
            print("\nSelected language: English\n")
            return
        else:
            print("  Opción no válida / Invalid option, please try again.")


# ==========================
# Excepciones de control / Control-flow exceptions
# ==========================


class GoToMainMenu(Exception):
    """Señal para volver al menú principal / Signal to go back to main menu."""
    pass


class QuitProgram(Exception):
    """Señal para terminar el programa / Signal to quit the program."""
    pass


# ==========================
# Utilidades de entrada / Input helpers
# ==========================


def _check_special(raw: str) -> None:
    """
    Revisa si el usuario quiere volver al menú o salir.
    Check if the user wants to go back to main menu or quit.

    - 'm', 'menu', 'main', 'back'   -> GoToMainMenu
    - 'q', 'salir', 'exit', 'quit'  -> QuitProgram
    """
    text = raw.strip().lower()
    if text in {"m", "menu", "main", "back"}:
        raise GoToMainMenu()
    if text in {"q", "salir", "exit", "quit"}:
        raise QuitProgram()


def _ask_text(prompt_es: str, prompt_en: str, default: Optional[str] = None) -> str:
    """
    Pide un valor de texto libre; el solver decide si es válido.
    Ask for a free-text value; the solver decides whether it is valid.
    """
    prompt = prompt_es if LANG == "es" else prompt_en
    raw = input(prompt).strip()
    _check_special(raw)
    if raw == "" and default is not None:
        return default
    return raw


def _select_fluid() -> str:
    """Selecciona el fluido / Select the fluid."""
    codes = list(FLUIDS)
    if LANG == "es":
        print("\nTipo de fluido:")
        prompt = "Opción [1/2/3, por defecto 1]: "
        invalid = "  Opción no válida, intente nuevamente."
    else:
        print("\nFluid type:")
        prompt = "Option [1/2/3, default 1]: "
        invalid = "  Invalid option, please try again."
    for i, code in enumerate(codes, start=1):
        print(f"  {i}) {get_fluid_label(code, LANG)}")

    while True:
        choice = input(prompt).strip()
        _check_special(choice)
        if choice == "":
            return codes[0]
        if choice in {"1", "2", "3"}:
            return codes[int(choice) - 1]
        print(invalid)


def _select_material() -> str:
    """Selecciona el material de la tubería / Select the pipe material."""
    codes = list(MATERIALS)
    if LANG == "es":
        print("\nMaterial de la tubería:")
        prompt = "Opción [1/2, por defecto 1]: "
        invalid = "  Opción no válida, intente nuevamente."
    else:
        print("\nPipe material:")
        prompt = "Option [1/2, default 1]: "
        invalid = "  Invalid option, please try again."
    for i, code in enumerate(codes, start=1):
        eps_mm = MATERIALS[code]["epsilon"] * 1000.0
        print(f"  {i}) {get_material_label(code, LANG)} (ε = {eps_mm:.1e} mm)")

    while True:
        choice = input(prompt).strip()
        _check_special(choice)
        if choice == "":
            return codes[0]
        if choice in {"1", "2"}:
            return codes[int(choice) - 1]
        print(invalid)


def _select_main_option() -> str:
    """Menú principal / Main menu."""
    if LANG == "es":
        print("\n¿Qué desea hacer?")
        print("  1) Calcular caudal")
        print("  2) Salir")
        prompt = "Opción [1/2]: "
        invalid = "  Opción no válida, intente nuevamente."
    else:
        print("\nWhat do you want to do?")
        print("  1) Calculate flow rate")
        print("  2) Quit")
        prompt = "Option [1/2]: "
        invalid = "  Invalid option, please try again."

    while True:
        choice = input(prompt).strip()
        _check_special(choice)
        if choice in {"1", "2"}:
            return choice
        print(invalid)


def _fill_form(session: FormSession) -> None:
    """
    Pide los seis campos y los guarda en la sesión.
    Asks for the six fields and stores them in the session.
    """
    if LANG == "es":
        print("\nIngreso de datos (puede escribir 'm' para volver al menú o 'q' para salir):\n")
    else:
        print("\nData input (you can type 'm' to go back to menu or 'q' to quit):\n")

    session.update("pressure_bar", _ask_text("Presión de suministro [bar]: ", "Supply pressure [bar]: "))
    session.update("fluid_type", _select_fluid())
    session.update("length_m", _ask_text("\nLongitud de la tubería [m]: ", "\nPipe length [m]: "))
    session.update("diameter_mm", _ask_text("Diámetro interno [mm]: ", "Internal diameter [mm]: "))
    session.update("material", _select_material())
    session.update(
        "elevation_m",
        _ask_text(
            "\nDesnivel [m] (+ subida, - bajada, ENTER = 0): ",
            "\nElevation change [m] (+ uphill, - downhill, ENTER = 0): ",
            default="0",
        ),
    )


# ==========================
# Impresión de resultados / Printing results
# ==========================


def _print_session(session: FormSession) -> None:
    """Imprime el último resultado de la sesión / Print the session's last outcome."""
    if session.error is not None:
        print("\n[ERROR] " + session.error.localized(LANG) + "\n")
        return

    res = session.result
    if res is None:
        return

    if LANG == "es":
        print("\n===== RESULTADOS: CAUDAL EN TUBERÍA =====")
    else:
        print("\n===== RESULTS: PIPE FLOW RATE =====")
    for line in session.display_lines(LANG):
        print("  " + line)

    if LANG == "es":
        print("\nDiagnóstico de la iteración:")
        print(f"  Reynolds Re:           {res.reynolds:.2e}")
        print(f"  f (Darcy-Weisbach):    {res.friction_factor:.6f}")
        print(f"  Iteraciones:           {res.iterations}")
        if not res.converged:
            print("  (se alcanzó el máximo de iteraciones; se usa la última estimación)")
    else:
        print("\nIteration diagnostics:")
        print(f"  Reynolds Re:           {res.reynolds:.2e}")
        print(f"  f (Darcy-Weisbach):    {res.friction_factor:.6f}")
        print(f"  Iterations:            {res.iterations}")
        if not res.converged:
            print("  (iteration limit reached; the last estimate is used)")
    print("==========================================\n")


def _print_curve(curve: FlowCurve) -> None:
    """Tabla del barrido de presión / Pressure sweep table."""
    if LANG == "es":
        print("  p [bar]    Q [L/s]    v [m/s]   p_disp [bar]")
    else:
        print("  p [bar]    Q [L/s]    v [m/s]   p_avail [bar]")
    for x, q, v, p in curve.rows():
        print(f"  {x:7.2f}  {q:9.1f}  {v:9.2f}  {p:12.2f}")


# ==========================
# Modo interactivo / Interactive mode
# ==========================


def run_interactive() -> None:
    """Asistente interactivo / Interactive assistant."""
    _set_language()

    if LANG == "es":
        print("============================================")
        print("  Calculadora de caudal en tubería")
        print("  (Darcy-Weisbach, Swamee-Jain)")
        print("============================================")
        print("  En cualquier pregunta:")
        print("    - 'm' o 'menu'          -> volver al menú principal")
        print("    - 'q', 'salir', 'exit'  -> salir\n")
    else:
        print("============================================")
        print("  Pipe flow rate calculator")
        print("  (Darcy-Weisbach, Swamee-Jain)")
        print("============================================")
        print("  At any prompt:")
        print("    - 'm', 'menu', 'main'   -> go back to main menu")
        print("    - 'q', 'quit', 'exit'   -> quit\n")

    session = FormSession()

    while True:
        try:
            if _select_main_option() == "2":
                if LANG == "es":
                    print("Saliendo... ¡hasta luego!")
                else:
                    print("Quitting... goodbye!")
                break

            _fill_form(session)
            session.calculate()
            _print_session(session)

        except GoToMainMenu:
            if LANG == "es":
                print("\nVolviendo al menú principal...\n")
            else:
                print("\nGoing back to main menu...\n")
            continue
        except QuitProgram:
            if LANG == "es":
                print("\nSaliendo... ¡hasta luego!")
            else:
                print("\nQuitting... goodbye!")
            break


# ===========================
#  MODO NO INTERACTIVO (CLI)
# ===========================

def parse_args(argv: Any = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description=(
            "Estimación del caudal en una tubería presurizada "
            "a partir de presión, geometría, material, fluido y desnivel."
        )
    )
    parser.add_argument(
        "--interactive", "-i",
        action="store_true",
        help="Modo asistente interactivo (te va preguntando paso a paso).",
    )
    parser.add_argument("--pressure", type=str,
                        help="Presión de suministro [bar].")
    parser.add_argument("--length", type=str,
                        help="Longitud de la tubería [m].")
    parser.add_argument("--diameter", type=str,
                        help="Diámetro interno [mm].")
    parser.add_argument("--fluid", choices=sorted(FLUIDS), default="water",
                        help="Fluido (por defecto: water).")
    parser.add_argument("--material", choices=sorted(MATERIALS), default="PE",
                        help="Material de la tubería (por defecto: PE).")
    parser.add_argument("--elevation", type=str, default="0",
                        help="Desnivel [m], positivo en subida (por defecto: 0).")
    parser.add_argument("--lang", choices=["es", "en"], default="es",
                        help="Idioma de la salida (por defecto: es).")
    parser.add_argument(
        "--sweep-pressure",
        nargs=3,
        metavar=("START", "STOP", "NUM"),
        help="Barrido de presión de START a STOP [bar] con NUM puntos.",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Imprime la salida en formato JSON (útil para integrarlo con otras tools).",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Muestra el detalle de cada iteración (logging DEBUG).",
    )
    args = parser.parse_args(argv)

    if args.sweep_pressure is not None:
        start, stop, num = args.sweep_pressure
        try:
            args.sweep_pressure = (float(start), float(stop), int(num))
        except ValueError:
            parser.error(
                "--sweep-pressure: START y STOP deben ser números y NUM un entero "
                "(START and STOP must be numbers and NUM an integer)."
            )
    return args


def _curve_to_dict(curve: FlowCurve) -> dict:
    def clean(values) -> List[Optional[float]]:
        return [None if math.isnan(v) else float(v) for v in values]

    return {
        "variable": curve.variable,
        "x": clean(curve.x),
        "flow_lps": clean(curve.flow_lps),
        "velocity_ms": clean(curve.velocity_ms),
        "available_pressure_bar": clean(curve.available_pressure_bar),
    }


def main(argv: Any = None) -> None:
    global LANG
    args = parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    # Sin datos de tubería -> asistente interactivo
    if args.interactive or all(
        getattr(args, name) is None for name in ("pressure", "length", "diameter")
    ):
        run_interactive()
        return

    LANG = args.lang
    inputs = InputSet(
        pressure_bar=args.pressure,
        fluid_type=args.fluid,
        length_m=args.length,
        diameter_mm=args.diameter,
        material=args.material,
        elevation_m=args.elevation,
    )

    if args.sweep_pressure is not None:
        start, stop, num = args.sweep_pressure
        try:
            curve = sweep_pressure(inputs, pressure_range(start, stop, num))
        except ValueError as e:
            print(f"[ERROR] {e}", file=sys.stderr)
            sys.exit(1)
        if args.json:
            print(json.dumps(_curve_to_dict(curve), indent=2))
        else:
            _print_curve(curve)
        return

    session = FormSession(inputs)
    session.calculate()
    if session.error is not None:
        print(f"[ERROR] {session.error.localized(LANG)}", file=sys.stderr)
        sys.exit(1)

    if args.json:
        print(json.dumps(session.result.to_dict(), indent=2, sort_keys=False))
    else:
        _print_session(session)


if __name__ == "__main__":
    main()
