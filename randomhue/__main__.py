#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: randomhue/__main__.py

from randomhue.main import main

if __name__ == "__main__":
    main()
