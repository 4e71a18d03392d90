import unittest

from stubble.model import Literal, Producer, Sequential, as_response, resolve_response


class ResponseTestCase(unittest.TestCase):
    def test_literal(self) -> None:
        response = Literal(12.5)

        self.assertEqual(12.5, resolve_response(response, (), {}))
        self.assertEqual(12.5, resolve_response(response, ("ignored",), {"also": "ignored"}))

    def test_producer(self) -> None:
        calls = []

        def produce(*args, **kwargs):
            calls.append((args, kwargs))
            return len(calls)

        response = Producer(produce)

        self.assertEqual(1, resolve_response(response, (1, 2), {}))
        self.assertEqual(2, resolve_response(response, (), {"title": "Dune"}))
        self.assertEqual([((1, 2), {}), ((), {"title": "Dune"})], calls)

    def test_sequential(self) -> None:
        response = Sequential(["a", "b"])

        results = [resolve_response(response, (), {}) for _ in range(4)]

        self.assertEqual(["a", "b", "b", "b"], results)

    def test_sequential_requires_values(self) -> None:
        with self.assertRaises(ValueError):
            Sequential([])

    def test_as_response(self) -> None:
        producer = Producer(str)

        self.assertIs(producer, as_response(producer))
        self.assertEqual(Literal("Dune"), as_response("Dune"))
        # callables are values unless wrapped in a Producer
        self.assertEqual(Literal(str), as_response(str))


if __name__ == "__main__":
    unittest.main()
