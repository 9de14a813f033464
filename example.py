#!/usr/bin/env python3
"""
Example usage of the Connect Four game.

This script plays a few scripted games with GameController and can run an
interactive two-player game in the terminal.
"""

import argparse
import logging

from connectfour import GameController


def play_moves(game: GameController, moves):
    """Play a list of columns, printing the board after each accepted move."""
    for col in moves:
        player = game.get_active_player()
        print(f"{player.name} plays column {col}")

        result = game.play_round(col)
        if result.is_rejected:
            print(f"Move rejected: {result.reason.value}")
            continue

        print(game)
        print()
        if result.is_game_over:
            return result
    return None


def example_basic_game():
    """Demonstrate a game won on a diagonal."""
    print("=== Diagonal Win ===")

    game = GameController("Alice", "Bob")
    result = play_moves(game, [3, 2, 2, 1, 1, 0, 1, 0, 0, 6, 0])

    print(f"Game result: {game.state.value}")
    if result is not None and result.winner:
        print(f"Winner: {result.winner}, line {game.winning_line}")
    print("\n" + "=" * 50 + "\n")


def example_full_column():
    """Demonstrate that a full column is rejected and the same player retries."""
    print("=== Full Column ===")

    game = GameController()
    play_moves(game, [0] * 6)
    result = game.play_round(0)
    print(f"Seventh token in column 0: {result.outcome.value} ({result.reason.value})")
    print(f"Still {game.get_active_player().name}'s turn")
    print("\n" + "=" * 50 + "\n")


def example_draw():
    """Fill the board without anyone connecting four."""
    print("=== Draw ===")

    game = GameController()
    for col in [0, 2, 1, 3, 4, 6, 5] * 6:
        result = game.play_round(col)

    print(game)
    print(f"Final result: {result.outcome.value}")
    print("\n" + "=" * 50 + "\n")


def example_interactive_game():
    """Two players take turns at the keyboard."""
    print("=== Interactive Connect Four ===")
    print("Enter column numbers (0-6) to play")
    print("Enter 'q' to quit")

    game = GameController(input("Player one name: "), input("Player two name: "))
    print(game)

    while not game.is_game_over():
        player = game.get_active_player()
        print(f"\n{player.name}'s turn ({player.token.name.lower()})")
        print(f"Valid moves: {game.valid_columns()}")

        try:
            user_input = input("Enter column: ").strip()
            if user_input.lower() == 'q':
                print("Game quit by user")
                return

            result = game.play_round(int(user_input))
        except ValueError as e:
            print(f"Invalid move: {e}")
            continue
        except (KeyboardInterrupt, EOFError):
            print("\nGame interrupted. Exiting...")
            return

        if result.is_rejected:
            print("That column is full, pick another one")
            continue
        print(game)

    if game.get_winner():
        print(f"\nCongratulations {game.get_winner().name}!")
    else:
        print("\nIt's a draw!")


def main():
    parser = argparse.ArgumentParser(description="Connect Four examples")
    parser.add_argument('--interactive', action='store_true', help="play a game in the terminal")
    parser.add_argument('--debug', action='store_true', help="log the board after every move")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.debug else logging.INFO)

    if args.interactive:
        example_interactive_game()
        return

    example_basic_game()
    example_full_column()
    example_draw()


if __name__ == "__main__":
    main()
