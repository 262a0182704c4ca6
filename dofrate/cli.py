#!/usr/bin/env python
# -*- coding: utf-8 -*-

#----------------------------------------------------------------------------------------------------------------------------------
# includes

# standards
import json
import logging
from os import environ
from sys import argv, exit

# this library
from dofrate.config import RateConfig
from dofrate.exceptions import ConfigurationError
from dofrate.scheduler import UpdateScheduler
from dofrate.server import create_app
from dofrate.store import FAVICON_KEY, ShelfStore, load_reading
from dofrate.updater import RateUpdater

#----------------------------------------------------------------------------------------------------------------------------------

class DofRateCli(object):

    def __init__(self, config):
        self.config = config

    def serve(self):
        with ShelfStore.build(self.config.store_path) as store:
            updater = RateUpdater(store, self.config)
            scheduler = UpdateScheduler(updater, self.config.schedule_seconds)
            app = create_app(store, updater, self.config)
            scheduler.start()
            try:
                # returns on Ctrl-C
                app.run(host=self.config.host, port=self.config.port, threaded=True)
            finally:
                scheduler.stop()
                updater.release_resources()

    def update(self):
        with ShelfStore.build(self.config.store_path) as store:
            updater = RateUpdater(store, self.config)
            try:
                result = updater.update()
            finally:
                updater.release_resources()
        print(json.dumps(result.to_dict()))
        return 0 if result.is_ok else 1

    def show(self):
        with ShelfStore.build(self.config.store_path) as store:
            reading = load_reading(store)
        if reading is None:
            logging.error("No rate in %s", self.config.store_path)
            return 1
        print(json.dumps(reading.to_json()))

    def floor(self, price=None):
        with ShelfStore.build(self.config.store_path) as store:
            updater = RateUpdater(store, self.config)
            try:
                if price is not None:
                    updater.set_floor_price(price)
                print(format(updater.floor_price(), 'f'))
            except ConfigurationError as error:
                logging.error(str(error))
                return 1
            finally:
                updater.release_resources()

    def favicon(self, file_path):
        with open(file_path, 'rb') as file_in:
            favicon = file_in.read()
        with ShelfStore.build(self.config.store_path) as store:
            store.put(FAVICON_KEY, favicon)
        print("%s: %d bytes loaded" % (file_path, len(favicon)))

#----------------------------------------------------------------------------------------------------------------------------------

def find_command(cli, command_name):
    if command_name.startswith('_'):
        return None
    method = getattr(cli, command_name, None)
    return method if callable(method) else None


def main(args=None):
    args = argv[1:] if args is None else args
    logging.basicConfig(level='INFO', format='%(asctime)s %(levelname)s %(message)s')
    cli = DofRateCli(RateConfig.from_environ(environ))
    method = find_command(cli, args[0]) if args else None
    if method is None:
        print("usage: %s <command> [args...]" % argv[0])
        print("Available commands:")
        for command in sorted(dir(cli)):
            if find_command(cli, command) is not None:
                print("    %s" % command)
        exit(2)
    else:
        exit(method(*args[1:]) or 0)

if __name__ == '__main__':
    main()

#----------------------------------------------------------------------------------------------------------------------------------
