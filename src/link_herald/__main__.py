from link_herald.clients.matrix import run

if __name__ == "__main__":
    run()
