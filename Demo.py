from LinkedList import SortedLinkedList


def main():
    numbers = SortedLinkedList()
    numbers.insert(33)
    numbers.insert(7)
    numbers.insert(15)
    numbers.insert(3)
    numbers.insert(33)  # duplicates allowed

    print("Numbers:", numbers.toArray())

    fruits = SortedLinkedList()
    fruits.insertMany(["watermelon", "banana", "apple", "kiwi", "cherry", "banana"])

    print("Fruits:", fruits.toArray())


if __name__ == "__main__":
    main()
