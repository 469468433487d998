"""
Interactive console program for the Golay coding scenarios.
"""

from typing import Callable, Optional

from GolayCode.core.bitvector import BitVector
from GolayCode.core.constants import CODEWORD_BITS, MESSAGE_BITS
from GolayCode.core.errors import GolayError, InvalidFormat
from GolayCode.interface.golay import Golay
from GolayCode.interface.visualizer import TransmissionVisualizer, render_errors
from GolayCode.simulation.config import SimulationConfig

VECTOR, TEXT, BMP_IMAGE, EXIT = 1, 2, 3, 4

SCENARIOS = {
    VECTOR: "Coding vector",
    TEXT: "Coding text",
    BMP_IMAGE: "Coding BMP image",
}


class ConsoleProgram:
    """
    Menu-driven console loop.

    Args:
        read: Returns the next line of user input (raises EOFError at the end)
        write: Prints one line
        config: Base configuration; the probability typed by the user replaces
            its error_probability
    """

    def __init__(
        self,
        read: Callable[[], str] = input,
        write: Callable[[str], None] = print,
        config: Optional[SimulationConfig] = None,
    ):
        self.read = read
        self.write = write
        self.config = config or SimulationConfig()

    def run(self) -> None:
        try:
            while True:
                option = self.ask_option()
                if option == EXIT:
                    break

                self.write("Golay Code program")
                self.write(SCENARIOS[option])
                self.write("")
                probability = self.ask_probability()
                golay = self._create_golay(probability)

                try:
                    if option == VECTOR:
                        self.run_vector(golay)
                    elif option == TEXT:
                        self.run_text(golay)
                    else:
                        self.run_bmp_image(golay)
                except (GolayError, OSError) as e:
                    self.write(f"Error: {e}")
        except EOFError:
            pass

    def _create_golay(self, probability: float) -> Golay:
        config = SimulationConfig.from_dict({**self.config.to_dict(), "error_probability": probability})
        return Golay(config, visualizer=TransmissionVisualizer(verbose=False))

    def ask_option(self) -> int:
        self.write("Golay Code program")
        self.write("")
        self.write("Coding scenarios:")
        self.write("1. Vector")
        self.write("2. Text")
        self.write("3. BMP Image")
        self.write("4. Exit")
        self.write("Choose scenario by typing a number [1-4]:")

        while True:
            answer = self.read().strip()
            if answer.isdigit() and VECTOR <= int(answer) <= EXIT:
                return int(answer)
            self.write("Incorrect option. Try again.")

    def ask_probability(self) -> float:
        self.write("Write a failure probability from 0 to 1:")

        while True:
            answer = self.read().strip().replace(",", ".")
            try:
                probability = float(answer)
            except ValueError:
                probability = None

            if probability is not None and 0 < probability < 1:
                return probability
            self.write("Failure probability must be from 0 to 1 (e.g 0.005). Try again.")

    def ask_vector(self, length: int) -> BitVector:
        while True:
            answer = self.read().strip()
            if len(answer) == length:
                try:
                    return BitVector.from_bit_string(answer)
                except InvalidFormat:
                    pass
            self.write("Incorrect vector. Try again.")

    def ask_non_empty(self) -> str:
        while True:
            answer = self.read()
            if answer:
                return answer
            self.write("String is empty. Try again.")

    def ask_override(self, noisy: BitVector) -> Optional[BitVector]:
        self.write("Do you want to change vector before decoding it? [y/n]")

        while True:
            answer = self.read().strip()
            if answer == "y":
                self.write(f"Write a new {CODEWORD_BITS} length vector:")
                return self.ask_vector(CODEWORD_BITS)
            if answer == "n":
                return None
            self.write("Incorrect answer. Try again.")

    def run_vector(self, golay: Golay) -> None:
        self.write(f"Write a {MESSAGE_BITS} length vector [from 0 and 1] to code:")
        vector = self.ask_vector(MESSAGE_BITS)

        self.write("Starting coding...")
        self.write(f"Vector is: {vector}")
        self.write(f"Failure probability is: {golay.probability}")

        def override(noisy: BitVector) -> Optional[BitVector]:
            encoded = golay.encoder.encode(vector)
            errors = sum(1 for a, b in zip(encoded, noisy) if a != b)
            self.write(f"Encoded vector is: {encoded}")
            self.write(
                f"After sending through noisy channel ({errors} errors in red): "
                f"{render_errors(encoded, noisy)}"
            )
            return self.ask_override(noisy)

        report = golay.code_vector(vector, override=override)
        self.write(f"Decoded vector is: {report.decoded}")

    def run_text(self, golay: Golay) -> None:
        self.write("Write a not empty string to code:")
        text = self.ask_non_empty()

        self.write("Starting coding...")
        report = golay.code_string(text)
        self.write(f"String is: {report.text}")
        self.write(f"Failure probability is: {golay.probability}")
        self.write("After sending string through noisy channel:")
        self.write(f"String without coding: {report.without_coding}")
        self.write(f"String with Golay coding: {report.with_coding}")

    def run_bmp_image(self, golay: Golay) -> None:
        self.write("Write a full path to BMP image to code:")
        path = self.ask_non_empty().strip()

        self.write("Starting coding...")
        try:
            report = golay.code_bmp_image(path)
        except (GolayError, OSError):
            self.write("File not found or error while processing it")
            return

        self.write("New files are created")
        self.write(f"  {report.without_coding_path}")
        self.write(f"  {report.with_coding_path}")


def main() -> None:
    ConsoleProgram().run()


if __name__ == "__main__":
    main()
